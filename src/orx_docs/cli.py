import asyncio
import logging

import typer  # type: ignore
from rich.console import Console  # type: ignore
from rich.markup import escape  # type: ignore
from rich.syntax import Syntax  # type: ignore
from rich.table import Table  # type: ignore

# Ensure providers are registered
import orx_docs.providers  # noqa: F401
from orx_docs.base import DocResult
from orx_docs.config import Settings
from orx_docs.errors import DocSearchError
from orx_docs.pipeline import DocSearch
from orx_docs.registry import default_registry, get_all_providers, list_providers

app = typer.Typer(help="orx-docs documentation search CLI")
console = Console()

# Rich syntax lexers for the languages the extractor reports
_LEXERS = {"html": "html", "css": "css", "js": "javascript"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


def _settings() -> Settings:
    try:
        return Settings.from_env()
    except RuntimeError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(code=1) from e


@app.command("list")
def list_commands() -> None:
    """List available documentation providers."""
    providers = list_providers()
    if not providers:
        console.print("[yellow]No providers found.[/yellow]")
        return

    table = Table(title="Available Providers")
    table.add_column("Name", style="cyan")
    table.add_column("Class", style="green")
    all_providers = get_all_providers()
    for name in providers:
        table.add_row(name, all_providers[name].__name__)

    console.print(table)


@app.command("search")
def search(
    provider_name: str = typer.Argument(..., help="Name of the provider (e.g., mdn)"),
    query: str = typer.Argument(..., help="Search query"),
) -> None:
    """Search a documentation provider and show the page example."""
    settings = _settings()
    pipeline = DocSearch(default_registry(settings), settings=settings)

    with console.status(f"Searching {provider_name} for '{query}'..."):
        try:
            result = asyncio.run(pipeline.search(provider_name, query))
        except DocSearchError as e:
            console.print(f"[red]Error:[/red] {escape(e.user_message)}")
            raise typer.Exit(code=1) from e

    _print_result(result)


def _print_result(result: DocResult) -> None:
    console.print(f"[bold cyan]{escape(result.page.title)}[/bold cyan]")
    console.print(f"[blue underline]{escape(result.page.url)}[/blue underline]")
    if result.page.summary:
        console.print(escape(result.page.summary))

    if result.example is None:
        console.print("[yellow]No example found.[/yellow]")
        return

    console.print(f"\n[green]Example ({result.example.language})[/green]")
    lexer = _LEXERS.get(result.example.language, "text")
    console.print(Syntax(result.example.code, lexer))


if __name__ == "__main__":
    app()

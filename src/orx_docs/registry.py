from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from .base import ProviderAdapter

if TYPE_CHECKING:
    from .config import Settings

_PROVIDERS: dict[str, type[ProviderAdapter]] = {}


def register(cls: type[ProviderAdapter]) -> type[ProviderAdapter]:
    """Decorator to register a documentation provider class by its ``name``."""
    name = getattr(cls, "name", None)
    if not name:
        raise TypeError(f"{cls.__name__} must define a non-empty 'name' attribute")
    existing = _PROVIDERS.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Provider '{name}' is already registered by {existing}")
    _PROVIDERS[name] = cls
    return cls


def list_providers() -> list[str]:
    """List registered provider names."""
    return list(_PROVIDERS.keys())


def get_all_providers() -> dict[str, type[ProviderAdapter]]:
    return _PROVIDERS.copy()


class ProviderRegistry:
    """Read-only lookup of adapter instances by provider id."""

    def __init__(self, adapters: Iterable[ProviderAdapter]) -> None:
        by_id: dict[str, ProviderAdapter] = {}
        for adapter in adapters:
            if adapter.name in by_id:
                raise ValueError(f"Duplicate provider id '{adapter.name}'")
            by_id[adapter.name] = adapter
        self._adapters: Mapping[str, ProviderAdapter] = MappingProxyType(by_id)

    def get(self, provider_id: str) -> ProviderAdapter | None:
        return self._adapters.get(provider_id)

    def ids(self) -> list[str]:
        return list(self._adapters.keys())

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)


def default_registry(settings: Settings) -> ProviderRegistry:
    """Instantiate every registered provider class with ``settings``."""
    # Ensure providers are registered
    import orx_docs.providers  # noqa: F401

    return ProviderRegistry(
        cast(Any, provider_cls)(settings=settings)
        for provider_cls in _PROVIDERS.values()
    )

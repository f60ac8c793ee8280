from __future__ import annotations


class DocSearchError(Exception):
    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class ConfigurationError(DocSearchError):
    pass


class UnknownProviderError(DocSearchError):
    def __init__(self, provider_id: str, available: list[str] | None = None) -> None:
        message = f"Documentation '{provider_id}' not found."
        if available:
            message += f" Available: {', '.join(available)}"
        super().__init__(message)
        self.provider_id = provider_id


class InvalidQueryError(DocSearchError):
    pass


class NetworkError(DocSearchError):
    pass


class HttpStatusError(DocSearchError):
    def __init__(self, user_message: str, *, status_code: int, url: str) -> None:
        super().__init__(user_message)
        self.status_code = status_code
        self.url = url


class DecodeError(DocSearchError):
    pass


class NoResultsError(DocSearchError):
    pass

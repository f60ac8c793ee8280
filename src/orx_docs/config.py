from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_USER_AGENT = "orx-docs/0.1.0 (https://github.com/htmlgxn/signal-bot-orx; bot)"
DEFAULT_MDN_BASE_URL = "https://developer.mozilla.org"
DEFAULT_MDN_LOCALE = "en-US"


@dataclass(frozen=True)
class Settings:
    timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    mdn_base_url: str = DEFAULT_MDN_BASE_URL
    mdn_locale: str = DEFAULT_MDN_LOCALE

    @classmethod
    def from_env(cls) -> Settings:
        timeout_seconds = _parse_positive_float(
            "ORX_DOCS_TIMEOUT_SECONDS", os.getenv("ORX_DOCS_TIMEOUT_SECONDS"), 10.0
        )
        return cls(
            timeout_seconds=timeout_seconds,
            user_agent=_non_empty(os.getenv("ORX_DOCS_USER_AGENT"))
            or DEFAULT_USER_AGENT,
            mdn_base_url=(
                _non_empty(os.getenv("ORX_DOCS_MDN_BASE_URL")) or DEFAULT_MDN_BASE_URL
            ).rstrip("/"),
            mdn_locale=_non_empty(os.getenv("ORX_DOCS_MDN_LOCALE"))
            or DEFAULT_MDN_LOCALE,
        )


def _non_empty(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _parse_positive_float(name: str, value: str | None, default: float) -> float:
    if _non_empty(value) is None:
        return default
    try:
        parsed = float(value or "")
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {value!r}") from exc
    if parsed <= 0:
        raise RuntimeError(f"{name} must be greater than zero, got {value!r}")
    return parsed

"""Process-wide settings read from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional


DEFAULT_API_BASE_URL = "http://localhost:8000"
DEFAULT_REQUEST_TIMEOUT = 30.0

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Connection settings for the solver service.

    Attributes:
        api_base_url: Solver base URL without trailing slash.
        request_timeout: Seconds before a POST /simular is abandoned.
        discard_stale_responses: Drop responses from superseded submissions
            instead of letting the last one to settle win.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    discard_stale_responses: bool = False

    def __post_init__(self):
        object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")

    @property
    def display_host(self) -> str:
        """Base URL without its scheme, for the status badge."""
        for scheme in ("https://", "http://"):
            if self.api_base_url.startswith(scheme):
                return self.api_base_url[len(scheme):]
        return self.api_base_url

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from PLANIFICADOR_* environment variables.

        Raises:
            ValueError: If PLANIFICADOR_REQUEST_TIMEOUT is not a number.
        """
        env = os.environ if environ is None else environ

        base_url = env.get("PLANIFICADOR_API_BASE_URL", "").strip() or DEFAULT_API_BASE_URL

        raw_timeout = env.get("PLANIFICADOR_REQUEST_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT
        except ValueError:
            raise ValueError(
                f"PLANIFICADOR_REQUEST_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        discard = env.get("PLANIFICADOR_DISCARD_STALE", "").strip().lower() in _TRUE_VALUES

        return cls(
            api_base_url=base_url,
            request_timeout=timeout,
            discard_stale_responses=discard,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first use."""
    return Settings.from_env()

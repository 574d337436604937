"""Environment routing and static client configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Final, Tuple

__all__ = [
    "ClientConfiguration",
    "DEFAULT_PER_PAGE",
    "DEFAULT_TIMEOUT",
    "ENVIRONMENTS",
    "KEY_PREFIXES",
    "resolve_environment",
]

TEST_BASE_URL: Final[str] = os.getenv(
    "WOODCORE_TEST_BASE_URL", "https://spark.test.woodcoreapp.com/api/v2"
).rstrip("/")
PROD_BASE_URL: Final[str] = os.getenv(
    "WOODCORE_PROD_BASE_URL", "https://spark.woodcoreapp.com/api/v2"
).rstrip("/")

DEFAULT_TIMEOUT: Final[float] = float(os.getenv("WOODCORE_TIMEOUT", "10"))
DEFAULT_PER_PAGE: Final[int] = 10

# environment name -> base URL
ENVIRONMENTS: Dict[str, str] = {
    "test": TEST_BASE_URL,
    "prod": PROD_BASE_URL,
}

# checked in order; first matching prefix wins
KEY_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("wc_test", "test"),
)
FALLBACK_ENVIRONMENT: Final[str] = "prod"


def resolve_environment(api_key: str) -> str:
    """Return the environment name a key routes to."""
    for prefix, env in KEY_PREFIXES:
        if api_key.startswith(prefix):
            return env
    return FALLBACK_ENVIRONMENT


@dataclass(frozen=True)
class ClientConfiguration:
    """Immutable routing data shared by every endpoint group of one client."""

    base_url: str
    api_key: str
    environment: str = FALLBACK_ENVIRONMENT

    @classmethod
    def for_key(cls, api_key: str) -> "ClientConfiguration":
        env = resolve_environment(api_key)
        return cls(base_url=ENVIRONMENTS[env], api_key=api_key, environment=env)

    def __repr__(self) -> str:
        # never leak the key into logs / tracebacks
        return (
            f"ClientConfiguration(base_url={self.base_url!r}, "
            f"environment={self.environment!r}, api_key='***')"
        )

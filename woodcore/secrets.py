"""Secret lookup for the API key: JSON secrets file first, then environment."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

__all__ = ["SecretsManager", "secrets", "get_secret"]


class SecretsManager:
    """Read secrets from the JSON file at ``SECRETS_PATH``.

    The file is read once and cached. Keys missing from the file are looked
    up in ``os.environ``. :meth:`set_override` swaps the cache for tests.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(
            path or os.getenv("SECRETS_PATH", "/var/run/secrets/woodcore.json")
        )
        self._cache: dict[str, Any] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _file_secrets(self) -> dict[str, Any]:
        if self._cache is None:
            try:
                self._cache = json.loads(self._path.read_text(encoding="utf-8"))
            except FileNotFoundError:
                self._cache = {}
        return self._cache

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        value = self._file_secrets().get(key)
        if value is None:
            value = os.environ.get(key)
        return default if value is None else value

    def set_override(self, data: dict[str, Any]) -> None:
        """Replace the cached file contents (test helper)."""

        self._cache = dict(data)

    def clear(self) -> None:
        """Drop the cache so the file is re-read on next access."""

        self._cache = None


secrets = SecretsManager()


def get_secret(key: str, default: Optional[Any] = None) -> Any:
    return secrets.get(key, default)

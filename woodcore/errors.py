"""Error taxonomy raised by the WoodCore client."""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

__all__ = [
    "WoodCoreError",
    "RemoteAPIError",
    "TransportError",
    "ConfigurationError",
]


class WoodCoreError(Exception):
    """Base class; every error carries ``name``, ``code`` and ``message``."""

    def __init__(self, message: str, code: Union[int, str, None] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "code": self.code, "message": self.message}

    def __repr__(self) -> str:
        return f"{self.name}(code={self.code!r}, message={self.message!r})"


class RemoteAPIError(WoodCoreError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, body: Optional[Any] = None) -> None:
        super().__init__(message, code=status_code)
        self.body = body

    @property
    def status_code(self) -> int:
        return self.code  # type: ignore[return-value]


class TransportError(WoodCoreError):
    """No HTTP response was received (connect, DNS, timeout...)."""


class ConfigurationError(WoodCoreError):
    """The client cannot be constructed (e.g. missing API key)."""

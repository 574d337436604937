from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from woodcore import secrets as secrets_module
from woodcore.config import ClientConfiguration
from woodcore.http import WoodCoreHTTP


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _secrets():
    """Start every test with an empty secrets file."""

    secrets_module.secrets.set_override({})
    yield
    secrets_module.secrets.clear()


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


class Recorder:
    """Wrap a handler and keep every request it sees."""

    def __init__(self, handler: Callable):
        self._handler = handler
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request):
        self.requests.append(request)
        result = self._handler(request)
        if hasattr(result, "__await__"):
            result = await result
        return result

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def api_config() -> ClientConfiguration:
    return ClientConfiguration(
        base_url="https://api.test/api/v2", api_key="wc_test_key", environment="test"
    )


@pytest.fixture
def make_http(api_config):
    """Build a WoodCoreHTTP whose transport is the given handler."""

    def _make(handler: Callable) -> tuple[WoodCoreHTTP, Recorder]:
        recorder = Recorder(handler)
        http = WoodCoreHTTP(api_config, transport=httpx.MockTransport(recorder))
        return http, recorder

    return _make

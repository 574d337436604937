"""Client facade: one API key, one HTTP layer, six endpoint groups."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from .collections import Accounting, Clients, IntraTransfer, Loans, Products, Savings
from .config import DEFAULT_TIMEOUT, ClientConfiguration
from .errors import ConfigurationError
from .http import WoodCoreHTTP
from .secrets import get_secret

__all__ = ["WoodCore"]

_LOG = logging.getLogger(__name__)


class WoodCore:
    """Entry point for the WoodCore API.

    The environment is picked from the key: ``wc_test...`` keys talk to the
    test host, every other key to production. Each group property returns a
    fresh group object; all of them share this client's HTTP layer.

        async with WoodCore("wc_test_xxx") as wc:
            client = await wc.clients.retrieve_client(7)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("API Key is required")
        self._config = ClientConfiguration.for_key(api_key)
        self._http = WoodCoreHTTP(
            self._config,
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
            transport=transport,
        )
        _LOG.debug(
            "WoodCore client ready: env=%s base_url=%s",
            self._config.environment, self._config.base_url,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "WoodCore":
        """Build a client from the ``WOODCORE_API_KEY`` secret / env var."""
        return cls(get_secret("WOODCORE_API_KEY"), **kwargs)

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    @property
    def environment(self) -> str:
        return self._config.environment

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def http(self) -> WoodCoreHTTP:
        return self._http

    # ---------------------------------------------------------------------
    # Endpoint groups
    # ---------------------------------------------------------------------

    @property
    def accounting(self) -> Accounting:
        return Accounting(self._http)

    @property
    def clients(self) -> Clients:
        return Clients(self._http)

    @property
    def intra_transfer(self) -> IntraTransfer:
        return IntraTransfer(self._http)

    @property
    def loans(self) -> Loans:
        return Loans(self._http)

    @property
    def products(self) -> Products:
        return Products(self._http)

    @property
    def savings(self) -> Savings:
        return Savings(self._http)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    def __repr__(self) -> str:
        return f"<WoodCore env={self.environment} base_url={self.base_url!r}>"

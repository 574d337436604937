"""Shared HTTP layer for the WoodCore API.

Uses `httpx.AsyncClient` with:
* Base URL and bearer key taken from a `ClientConfiguration`
* Default pagination params (perPage/page) on list GETs
* Coalescing of concurrent calls made through one `PendingRequest`
* Upstream failures normalized to `RemoteAPIError` / `TransportError`
* Prometheus counters + histogram (labels: method, endpoint, status)

There is no retry layer here; callers own their retry policy. Tests swap the
transport for `httpx.MockTransport`.
"""
from __future__ import annotations

import asyncio
import logging
import re
import time
from dataclasses import dataclass, replace
from typing import Any, AsyncIterator, Dict, Mapping, Optional

import httpx
from prometheus_client import Counter, Histogram
from pydantic import BaseModel, ConfigDict, ValidationError

from .config import DEFAULT_PER_PAGE, DEFAULT_TIMEOUT, ClientConfiguration
from .errors import RemoteAPIError, TransportError

__all__ = ["PageMeta", "PendingRequest", "RequestDescriptor", "WoodCoreHTTP"]

_LOG = logging.getLogger(__name__)

_REQUESTS_TOTAL = Counter(
    "woodcore_http_requests_total",
    "HTTP requests to the WoodCore API",
    labelnames=["method", "endpoint", "status"],
)
_LATENCY_SEC = Histogram(
    "woodcore_http_latency_seconds",
    "Latency for WoodCore HTTP requests",
    labelnames=["method", "endpoint"],
)

_METHODS = frozenset({"GET", "POST"})
_UNRESOLVED = re.compile(r"{\w*}")


@dataclass(frozen=True)
class RequestDescriptor:
    """One intended API call. Never mutated; derive variants with ``with_*``."""

    path: str
    method: str = "GET"
    query: Optional[Dict[str, Any]] = None
    body: Optional[Dict[str, Any]] = None
    # path template, used as a low-cardinality metrics label
    template: Optional[str] = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in _METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")
        if _UNRESOLVED.search(self.path):
            raise ValueError(f"Path has unresolved placeholders: {self.path!r}")
        object.__setattr__(self, "method", method)
        # private copies so later changes to the caller's dicts do not leak in
        if self.query is not None:
            object.__setattr__(self, "query", dict(self.query))
        if self.body is not None:
            object.__setattr__(self, "body", dict(self.body))

    @property
    def is_get(self) -> bool:
        return self.method == "GET"

    def with_defaults(self, per_page: int = DEFAULT_PER_PAGE) -> "RequestDescriptor":
        """Fill ``perPage``/``page`` on a GET that carries a query mapping."""
        if not self.is_get or self.query is None:
            return self
        query = dict(self.query)
        if not query.get("perPage"):
            query["perPage"] = per_page
        if not query.get("page"):
            query["page"] = 1
        return replace(self, query=query)

    def with_page(self, page: int) -> "RequestDescriptor":
        query = dict(self.query or {})
        query["page"] = page
        return replace(self, query=query)


class PageMeta(BaseModel):
    """Pagination block returned by list endpoints."""

    model_config = ConfigDict(extra="allow")

    currentPage: Optional[int] = None
    totalPage: Optional[int] = None


def _page_meta(body: Any) -> Optional[PageMeta]:
    if not isinstance(body, Mapping):
        return None
    raw = body.get("meta")
    if raw is None and isinstance(body.get("data"), Mapping):
        raw = body["data"].get("meta")
    if not isinstance(raw, Mapping):
        return None
    try:
        return PageMeta.model_validate(raw)
    except ValidationError as exc:
        _LOG.debug("Unreadable pagination meta %r: %s", raw, exc)
        return None


def _is_last_page(body: Any, requested: int) -> bool:
    meta = _page_meta(body)
    if meta is None or not meta.totalPage:
        return True
    # a stale currentPage must not hold the cursor back
    current = max(meta.currentPage or 0, requested)
    return current >= meta.totalPage


def _error_message(resp: httpx.Response, body: Any) -> str:
    message = body.get("message") if isinstance(body, Mapping) else None
    if isinstance(message, str):
        return message
    if isinstance(message, Mapping):
        return f"{message.get('message')}: {message.get('error')}"
    return resp.reason_phrase or f"HTTP {resp.status_code}"


def _json_or_none(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


class WoodCoreHTTP:
    """Owns the `httpx.AsyncClient` and performs single API round trips."""

    def __init__(
        self,
        config: ClientConfiguration,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        per_page: int = DEFAULT_PER_PAGE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._per_page = per_page
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    @property
    def per_page(self) -> int:
        return self._per_page

    def prepare(self, descriptor: RequestDescriptor) -> "PendingRequest":
        return PendingRequest(self, descriptor)

    async def send(self, descriptor: RequestDescriptor) -> Any:
        """Issue exactly one request and return the decoded JSON body."""
        descriptor = descriptor.with_defaults(self._per_page)
        method = descriptor.method
        endpoint_label = descriptor.template or descriptor.path
        headers = {"Authorization": f"Bearer {self._config.api_key}"}
        log_extra = {"endpoint": endpoint_label, "method": method}

        start = time.perf_counter()
        try:
            resp = await self._client.request(
                method,
                descriptor.path,
                params=descriptor.query,
                json=descriptor.body,
                headers=headers,
            )
        except httpx.RequestError as exc:
            _REQUESTS_TOTAL.labels(method, endpoint_label, "error").inc()
            code = type(exc).__name__
            _LOG.warning(
                "Transport failure on %s %s: %s (%s)",
                method, descriptor.path, exc, code,
                extra=log_extra,
            )
            raise TransportError(str(exc) or code, code=code) from exc
        elapsed = time.perf_counter() - start
        _LATENCY_SEC.labels(method, endpoint_label).observe(elapsed)
        _REQUESTS_TOTAL.labels(method, endpoint_label, resp.status_code).inc()
        _LOG.debug(
            "%s %s -> %s (%.3fs)", method, descriptor.path, resp.status_code, elapsed,
            extra={**log_extra, "status": resp.status_code},
        )

        if not resp.is_success:
            body = _json_or_none(resp)
            message = _error_message(resp, body)
            _LOG.warning(
                "WoodCore API error %s on %s %s: %s",
                resp.status_code, method, descriptor.path, message,
                extra={**log_extra, "status": resp.status_code},
            )
            raise RemoteAPIError(resp.status_code, message, body=body)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            _LOG.warning(
                "Invalid JSON from %s %s (status %s)", method, descriptor.path, resp.status_code,
                extra={**log_extra, "status": resp.status_code},
            )
            raise RemoteAPIError(resp.status_code, "Invalid JSON response", body=None) from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    # context-manager sugar
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


def _consume_exception(task: asyncio.Task) -> None:
    # waiters may all be cancelled; send() has already logged the failure
    if not task.cancelled():
        task.exception()


class PendingRequest:
    """Executor bound to one descriptor.

    While a call is in flight, further ``execute()`` calls on the same
    instance await that call instead of issuing another. The slot is emptied
    inside the call itself, so once it settles the next ``execute()`` goes
    back to the network.
    """

    def __init__(self, http: WoodCoreHTTP, descriptor: RequestDescriptor) -> None:
        self._http = http
        self._descriptor = descriptor
        self._pending: Optional[asyncio.Task] = None

    @property
    def descriptor(self) -> RequestDescriptor:
        return self._descriptor

    @property
    def in_flight(self) -> bool:
        return self._pending is not None

    async def execute(self) -> Any:
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._run())
            self._pending.add_done_callback(_consume_exception)
        # one caller being cancelled must not cancel the shared call
        return await asyncio.shield(self._pending)

    async def _run(self) -> Any:
        try:
            return await self._http.send(self._descriptor)
        finally:
            self._pending = None

    def __await__(self):
        return self.execute().__await__()

    async def pages(self) -> AsyncIterator[Any]:
        """Yield full response bodies page by page until the last page.

        Only GET requests paginate; anything else finishes without a call.
        """
        descriptor = self._descriptor.with_defaults(self._http.per_page)
        if not descriptor.is_get:
            return
        if descriptor.query is None:
            yield await self.execute()
            return

        page = int(descriptor.query["page"])
        while True:
            body = await PendingRequest(self._http, descriptor.with_page(page)).execute()
            last = _is_last_page(body, page)
            yield body
            if last:
                return
            page += 1

    def __repr__(self) -> str:
        d = self._descriptor
        return f"<PendingRequest {d.method} {d.path} in_flight={self.in_flight}>"

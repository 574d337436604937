"""Declarative endpoint tables.

Each endpoint group is a class whose attributes are :class:`Endpoint`
entries: an HTTP verb, a path template with ``{wireName}`` placeholders and
the names of the body / query fields. Reading an entry through a group
instance gives a :class:`BoundEndpoint`, which turns keyword arguments into a
:class:`~woodcore.http.RequestDescriptor` and hands it to the shared HTTP
layer::

    loan = await client.loans.retrieve_loan_account(42)
    async for page in client.savings.list_savings_accounts.pages(per_page=50):
        ...

Keyword arguments are the snake_case form of the wire names
(``glCode`` -> ``gl_code``, ``_isActive`` -> ``is_active``). Fields left as
``None`` are not sent.
"""
from __future__ import annotations

import re
from typing import Any, AsyncIterator, ClassVar, Dict, Optional, Tuple
from urllib.parse import quote

from .http import PendingRequest, RequestDescriptor, WoodCoreHTTP

__all__ = ["BoundEndpoint", "Endpoint", "EndpointGroup", "to_kwarg"]

_PLACEHOLDER = re.compile(r"{(\w+)}")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_kwarg(wire_name: str) -> str:
    """``manualEntriesAllowed`` -> ``manual_entries_allowed``."""
    return _CAMEL_BOUNDARY.sub("_", wire_name.lstrip("_")).lower()


def _compact(values: Dict[str, Any], fields: Tuple[str, ...]) -> Dict[str, Any]:
    return {f: values[f] for f in fields if values.get(f) is not None}


class Endpoint:
    """One row of an endpoint table."""

    def __init__(
        self,
        method: str,
        path: str,
        *,
        body: Tuple[str, ...] = (),
        query: Tuple[str, ...] = (),
        doc: str = "",
    ) -> None:
        self.method = method.upper()
        self.path = path
        self.body = tuple(body)
        self.query = tuple(query)
        self.doc = doc
        self.name = ""
        self.path_params: Tuple[str, ...] = tuple(_PLACEHOLDER.findall(path))

        if self.method == "GET" and self.body:
            raise ValueError(f"GET endpoint {path} cannot declare body fields")

        self._kwargs: Dict[str, str] = {}
        for wire in self.path_params + self.query + self.body:
            kw = to_kwarg(wire)
            if kw in self._kwargs:
                raise ValueError(f"Duplicate field {wire!r} on endpoint {path}")
            self._kwargs[kw] = wire

    @property
    def arguments(self) -> Tuple[str, ...]:
        """Keyword names accepted by this endpoint."""
        return tuple(self._kwargs)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional["EndpointGroup"], owner: type):
        if instance is None:
            return self
        return BoundEndpoint(instance._http, self)

    def build(self, *args: Any, **kwargs: Any) -> RequestDescriptor:
        """Resolve arguments into a descriptor. Raises ``TypeError`` on bad arguments."""
        label = f"{self.name or self.path}()"
        if len(args) > len(self.path_params):
            raise TypeError(
                f"{label} takes at most {len(self.path_params)} positional "
                f"argument(s) ({len(args)} given)"
            )
        values: Dict[str, Any] = dict(zip(self.path_params, args))
        for key, value in kwargs.items():
            wire = self._kwargs.get(key)
            if wire is None:
                raise TypeError(
                    f"{label} got an unexpected keyword argument {key!r}; "
                    f"expected one of: {', '.join(self.arguments)}"
                )
            if wire in values:
                raise TypeError(f"{label} got multiple values for argument {key!r}")
            values[wire] = value

        missing = [to_kwarg(p) for p in self.path_params if values.get(p) is None]
        if missing:
            raise TypeError(f"{label} missing required argument(s): {', '.join(missing)}")

        path = self.path.format_map(
            {p: quote(str(values[p]), safe="") for p in self.path_params}
        )
        return RequestDescriptor(
            path=path,
            method=self.method,
            query=_compact(values, self.query) if self.query else None,
            body=_compact(values, self.body) if self.method == "POST" else None,
            template=self.path,
        )

    def __repr__(self) -> str:
        return f"Endpoint({self.method} {self.path})"


class BoundEndpoint:
    """An :class:`Endpoint` tied to the HTTP layer of one group instance."""

    def __init__(self, http: WoodCoreHTTP, endpoint: Endpoint) -> None:
        self._http = http
        self.endpoint = endpoint
        self.__doc__ = endpoint.doc

    def descriptor(self, *args: Any, **kwargs: Any) -> RequestDescriptor:
        return self.endpoint.build(*args, **kwargs)

    def prepare(self, *args: Any, **kwargs: Any) -> PendingRequest:
        return self._http.prepare(self.descriptor(*args, **kwargs))

    async def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return await self.prepare(*args, **kwargs).execute()

    def pages(self, *args: Any, **kwargs: Any) -> AsyncIterator[Any]:
        return self.prepare(*args, **kwargs).pages()

    def __repr__(self) -> str:
        return f"<BoundEndpoint {self.endpoint.name} {self.endpoint.method} {self.endpoint.path}>"


class EndpointGroup:
    """Base for the named collections (accounting, loans, savings...)."""

    group_name: ClassVar[str] = ""

    def __init__(self, http: WoodCoreHTTP) -> None:
        self._http = http

    @property
    def config(self):
        return self._http.config

    @classmethod
    def endpoints(cls) -> Dict[str, Endpoint]:
        found: Dict[str, Endpoint] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Endpoint):
                    found[name] = attr
        return found

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.group_name or '?'} base_url={self._http.config.base_url!r}>"

"""
Immutable description of an outbound HTTP request.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Literal

from ._constants import METHOD_GET, METHOD_OVERRIDE_KEY, METHOD_POST
from .body import Body
from .telemetry.log import LOG
from .flatten import FlatEntry, flatten
from .headers import Headers

Method = Literal["get", "post"]


def _path_fragments(part: Any) -> list[str]:
    if isinstance(part, Iterable) and not isinstance(part, (str, bytes)):
        return [fragment for item in part for fragment in _path_fragments(item)]
    return [fragment for fragment in str(part).split("/") if fragment]


def _merged(current: Mapping[str, Any], values: Mapping[str, Any] | None, extra: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(current)
    if values:
        merged.update(values)
    merged.update(extra)
    return merged


@dataclass(frozen=True, slots=True)
class Request:
    """
    Data structure describing a request to a remote server.

    Every ``with_*`` method returns an updated copy and leaves the receiver untouched::

        request = (
            Request.create("https://api.example.com/")
            .with_path("users", 42)
            .with_headers({"Authorization": "Bearer token"})
            .with_body({"user": {"name": "Joe"}})
            .with_type("patch")
        )
        method, path, query, body, headers = request.to_tuple()
    """

    path: str = ""
    method: Method | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)

    # Bodies hold arbitrary nested values, so requests compare by value but are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.rstrip("/"))
        for name in ("headers", "query", "body"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @classmethod
    def create(cls, base_url: Any) -> "Request":
        return cls("" if base_url is None else str(base_url))

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------
    def with_path(self, *parts: Any) -> "Request":
        """
        Returns a copy with ``parts`` appended to the path.

        Parts are split on ``/`` and empty fragments are dropped, so
        ``with_path("a", "b/c", "")`` and ``with_path("a/b", "c")`` are equivalent.
        """
        fragments = _path_fragments(parts)
        if not fragments:
            return replace(self)
        return replace(self, path="/".join([self.path, *fragments]))

    def with_headers(self, values: Mapping[str, str] | None = None, /, **extra: str) -> "Request":
        return replace(self, headers=_merged(self.headers, values, extra))

    def with_query(self, values: Mapping[str, Any] | None = None, /, **extra: Any) -> "Request":
        return replace(self, query=_merged(self.query, values, extra))

    def with_body(self, values: Mapping[str, Any] | None = None, /, **extra: Any) -> "Request":
        """
        Returns a copy with ``values`` merged into the body.

        The merge is shallow: a nested value replaces the previous value under the
        same key as a whole.
        """
        return replace(self, body=_merged(self.body, values, extra))

    def with_type(self, method: str) -> "Request":
        """
        Returns a copy with the given HTTP verb.

        ``get`` drops the body. ``post`` drops the ``_method`` override field.
        Any other verb is sent as ``post`` with the verb in ``_method``.
        """
        if method == METHOD_GET:
            return replace(self, method=METHOD_GET, body={})
        if method == METHOD_POST:
            body = {key: value for key, value in self.body.items() if key != METHOD_OVERRIDE_KEY}
            return replace(self, method=METHOD_POST, body=body)
        return replace(self, method=METHOD_POST, body={**self.body, METHOD_OVERRIDE_KEY: method})

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def flat_body(self) -> list[FlatEntry]:
        return flatten(self.body)

    def is_multipart(self) -> bool:
        return any(entry.is_file for entry in self.flat_body())

    def params(self) -> tuple[dict[str, Any], Any, Any]:
        """
        Returns the query, the encoded body and the final headers.
        """
        body = Body.build(self)
        return dict(self.query), body, Headers.build(self, body)

    def to_tuple(self) -> tuple[Any, ...]:
        """
        Returns the arguments an ``Adapter`` needs: ``(method, path, query, body, headers)``.
        """
        rendered = (self.method, self.path, *self.params())
        LOG.debug("rendered request", extra={"method": self.method, "path": self.path})
        return rendered

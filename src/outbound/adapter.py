"""
Contract between a rendered request and the transport that performs it.
"""

from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from .body import MultipartBody


class Adapter(Protocol):
    """
    Executes a request rendered by ``Request.to_tuple``.

    Example::

        adapter(*request.to_tuple())
    """

    def __call__(
        self,
        method: str | None,
        path: str,
        query: Mapping[str, Any],
        body: str | MultipartBody | None,
        headers: Mapping[str, str],
    ) -> Any:
        ...


def to_httpx_request(
    method: str | None,
    path: str,
    query: Mapping[str, Any],
    body: str | MultipartBody | None,
    headers: Mapping[str, str],
) -> httpx.Request:
    """
    Convert a rendered request into an unsent ``httpx.Request``.

    A request without a type is sent as ``GET``.
    """
    if isinstance(body, MultipartBody):
        content: bytes | None = body.encode()
    elif body is not None:
        content = body.encode("utf-8")
    else:
        content = None
    return httpx.Request(
        method=(method or "get").upper(),
        url=path,
        params=dict(query) or None,
        content=content,
        headers=headers,
    )

"""
Final header negotiation for a rendered request.
"""

from typing import TYPE_CHECKING, Any

import httpx

from ._constants import CONTENT_TYPE_JSON
from .body import MultipartBody, content_type_for, stringify
from .env import get_config
from .request_id import RequestId

if TYPE_CHECKING:
    from .request import Request


class Headers:
    @classmethod
    def build(cls, request: "Request", body: Any = None) -> httpx.Headers:
        """
        Merge the declared headers of ``request`` with the negotiated ones.

        Declared headers win, except ``Content-Type`` for a multipart body, which
        must carry the body's boundary.
        """
        config = get_config()
        headers = httpx.Headers({str(key): stringify(value) for key, value in request.headers.items()})

        content_type = content_type_for(body)
        if isinstance(body, MultipartBody):
            headers["Content-Type"] = content_type
        elif content_type is not None:
            headers.setdefault("Content-Type", content_type)

        headers.setdefault("Accept", CONTENT_TYPE_JSON)
        if config.user_agent:
            headers.setdefault("User-Agent", config.user_agent)

        request_id = RequestId.value()
        if request_id:
            headers.setdefault(config.request_id_header, request_id)
        return headers

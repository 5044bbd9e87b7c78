"""
Encoding of request bodies for the transport layer.
"""

import hashlib
import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from urllib3 import encode_multipart_formdata

from ._constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON, CONTENT_TYPE_MULTIPART
from .env import get_config
from .telemetry.log import LOG
from .errors import EncodingError
from .flatten import FlatEntry
from .uploads import file_field

if TYPE_CHECKING:
    from .request import Request


class BodyFormat(str, Enum):
    JSON = "json"
    FORM = "form"


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _boundary_for(entries: tuple[FlatEntry, ...]) -> str:
    digest = hashlib.sha256()
    for key, value, is_file in entries:
        digest.update(key.encode())
        digest.update(b"\0")
        digest.update(stringify(value.path if is_file else value).encode())
        digest.update(b"\1" if is_file else b"\0")
    return f"outbound-{digest.hexdigest()[:32]}"


@dataclass(frozen=True, slots=True)
class MultipartBody:
    """
    A ``multipart/form-data`` body, kept as flattened entries until ``encode`` is called.

    The boundary depends only on the entries, so rendering the same request twice
    produces equal values.
    """

    entries: tuple[FlatEntry, ...]
    boundary: str

    @classmethod
    def from_entries(cls, entries: list[FlatEntry]) -> "MultipartBody":
        frozen = tuple(entries)
        return cls(entries=frozen, boundary=_boundary_for(frozen))

    @property
    def content_type(self) -> str:
        return f"{CONTENT_TYPE_MULTIPART}; boundary={self.boundary}"

    def fields(self) -> list[tuple[str, Any]]:
        """
        Returns one form field per entry, in flattening order. File leaves are read here.
        """
        fields: list[tuple[str, Any]] = []
        for key, value, is_file in self.entries:
            if not is_file:
                fields.append((key, stringify(value)))
                continue
            try:
                fields.append((key, file_field(value)))
            except OSError as exc:
                raise EncodingError(f"cannot read file: {exc}", key=key) from exc
        return fields

    def encode(self) -> bytes:
        """
        Encode the entries as wire bytes.

        Raises ``EncodingError`` when a field contains the boundary.
        """
        fields = self.fields()
        marker = f"--{self.boundary}".encode()
        for key, value in fields:
            data = value[1] if isinstance(value, tuple) else value.encode()
            if marker in data:
                raise EncodingError("field content contains the multipart boundary", key=key)
        payload, _ = encode_multipart_formdata(fields, boundary=self.boundary)
        return payload


class Body:
    @classmethod
    def build(cls, request: "Request", format: BodyFormat | str | None = None) -> "str | MultipartBody | None":
        """
        Encode the body of ``request``.

        Returns ``None`` for an empty body, a ``MultipartBody`` when any leaf is a file,
        and otherwise JSON or urlencoded text depending on ``format``.
        """
        if not request.body:
            return None

        entries = request.flat_body()
        if any(entry.is_file for entry in entries):
            LOG.debug("multipart body", extra={"path": request.path, "fields": len(entries)})
            return MultipartBody.from_entries(entries)

        body_format = BodyFormat(format or get_config().body_format)
        if body_format is BodyFormat.FORM:
            return urlencode([(key, stringify(value)) for key, value, _ in entries])
        return json.dumps(dict(request.body), default=str)


def content_type_for(body: "str | MultipartBody | None", format: BodyFormat | str | None = None) -> str | None:
    if body is None:
        return None
    if isinstance(body, MultipartBody):
        return body.content_type
    body_format = BodyFormat(format or get_config().body_format)
    return CONTENT_TYPE_FORM if body_format is BodyFormat.FORM else CONTENT_TYPE_JSON

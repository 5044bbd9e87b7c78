"""
Utilities for working with file uploads.
"""

import mimetypes
import os
from dataclasses import dataclass
from typing import Any, BinaryIO, Protocol, runtime_checkable

from ._constants import CONTENT_TYPE_OCTET_STREAM


@runtime_checkable
class FileLike(Protocol):
    """
    Capability set of a file leaf inside a request body: a readable stream
    that also knows where it lives on disk.
    """

    path: Any

    def read(self, *args: Any) -> Any:
        ...


@dataclass(slots=True)
class FileUpload:
    """
    Represents a file payload for multipart requests.

    Accepts either a binary stream (any object exposing ``read``) or raw ``bytes``.
    Uploads made with ``from_path`` hold no open handle: the file is opened, read and
    closed on every ``read``. ``path`` defaults to ``filename`` when the payload is not
    backed by a local file.
    """

    filename: str
    content: BinaryIO | bytes | None = None
    content_type: str | None = None
    source_path: str | None = None

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], *, content_type: str | None = None) -> "FileUpload":
        path = os.fspath(path)
        guessed, _ = mimetypes.guess_type(path)
        return cls(
            filename=os.path.basename(path),
            content_type=content_type or guessed,
            source_path=path,
        )

    @property
    def path(self) -> str:
        return self.source_path or self.filename

    def read(self, *args: Any) -> bytes:
        if isinstance(self.content, (bytes, bytearray)):
            return bytes(self.content)
        if self.content is None:
            if self.source_path is None:
                raise OSError(f"no content for upload {self.filename!r}")
            with open(self.source_path, "rb") as f:
                return f.read(*args)
        return read_from_start(self.content, *args)

    def as_field(self) -> tuple[str, bytes, str]:
        """
        Convert to the ``(filename, data, content_type)`` tuple used by the multipart encoder.
        """
        return self.filename, self.read(), self.content_type or CONTENT_TYPE_OCTET_STREAM


def read_from_start(stream: Any, *args: Any) -> bytes:
    """
    Read ``stream`` from its first byte, rewinding it when it supports seeking.
    """
    seekable = getattr(stream, "seekable", None)
    if seekable is not None and seekable():
        stream.seek(0)
    return stream.read(*args)


def is_file_like(value: Any) -> bool:
    return isinstance(value, FileLike)


def file_field(value: Any) -> tuple[str, bytes, str]:
    """
    Read any ``FileLike`` leaf into a multipart field tuple.
    """
    if isinstance(value, FileUpload):
        return value.as_field()
    path = os.fspath(value.path)
    guessed, _ = mimetypes.guess_type(path)
    return os.path.basename(path), read_from_start(value), guessed or CONTENT_TYPE_OCTET_STREAM

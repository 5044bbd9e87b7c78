"""
Immutable builder for outbound HTTP requests.
"""

from importlib import metadata as _metadata

from .adapter import Adapter, to_httpx_request
from .body import Body, BodyFormat, MultipartBody
from .env import configure_logging
from .errors import ConfigError, EncodingError, OutboundError
from .flatten import FlatEntry, flatten
from .headers import Headers
from .request import Request
from .request_id import RequestId, bound_request_id
from .uploads import FileLike, FileUpload

__all__ = [
    "Adapter",
    "Body",
    "BodyFormat",
    "ConfigError",
    "EncodingError",
    "FileLike",
    "FileUpload",
    "FlatEntry",
    "Headers",
    "MultipartBody",
    "OutboundError",
    "Request",
    "RequestId",
    "bound_request_id",
    "configure_logging",
    "flatten",
    "to_httpx_request",
    "__version__",
]

try:
    __version__ = _metadata.version("outbound")
except _metadata.PackageNotFoundError:  # pragma: no cover - local/checkout usage
    __version__ = "0.0.0"

"""
Source of the request correlation id sent with every rendered request.
"""

from contextlib import contextmanager
from typing import Iterator

from .env import bound_logging_vars, get_config, get_logging_contextvars

REQUEST_ID_KEY = "request_id"

_UNSET = object()


class RequestId:
    """
    Process-wide request id lookup.

    An id bound to the current context with ``bound_request_id`` wins over the
    configured one. Binding goes through structlog contextvars, so log lines
    emitted inside the context carry the same id.
    """

    _default: "str | None | object" = _UNSET

    @classmethod
    def value(cls) -> str | None:
        bound = get_logging_contextvars().get(REQUEST_ID_KEY)
        if bound:
            return str(bound)
        return cls.default()

    @classmethod
    def default(cls) -> str | None:
        if cls._default is _UNSET:
            cls._default = get_config().request_id
        return cls._default  # type: ignore[return-value]

    @classmethod
    def reset(cls) -> None:
        cls._default = _UNSET


@contextmanager
def bound_request_id(value: str) -> Iterator[str]:
    with bound_logging_vars(**{REQUEST_ID_KEY: value}):
        yield value

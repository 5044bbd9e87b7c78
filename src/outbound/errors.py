"""
Custom exceptions raised by the outbound package.
"""


class OutboundError(Exception):
    """Base exception for all errors raised by ``outbound``."""


class EncodingError(OutboundError):
    """
    Raised when a rendered body cannot be encoded into wire bytes.

    Attributes:
        key: Key path of the flattened body entry that failed, if known.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        details = f"{key}: {message}" if key else message
        super().__init__(details)


class ConfigError(OutboundError):
    """Raised when the loaded configuration fails validation."""

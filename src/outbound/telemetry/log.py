import sys
import logging
from typing import TextIO

import structlog

LOGGER_NAME = "outbound"
HANDLER_NAME = "outbound-structlog"

LOG = logging.getLogger(LOGGER_NAME)
LOG.addHandler(logging.NullHandler())

bound_logging_vars = structlog.contextvars.bound_contextvars


def get_logging_contextvars():
    return structlog.contextvars.get_contextvars()


def __shared_processors(format: str) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if format == "json":
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.PATHNAME,
                ]
            )
        )
    return processors


def __renderer(format: str):
    if format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logger(format="text", level="INFO", stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a structlog-formatted handler to the ``outbound`` logger.

    Context bound with ``bound_logging_vars`` (such as the request id) is merged into
    every record. Calling it again replaces the handler installed by the previous call.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=__shared_processors(format),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            __renderer(format),
        ],
    )

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    for existing in list(LOG.handlers):
        if existing.get_name() == HANDLER_NAME:
            LOG.removeHandler(existing)
    LOG.addHandler(handler)
    LOG.setLevel(level)
    return LOG

import os
from collections.abc import Mapping
from functools import lru_cache
from typing import TextIO

from dotenv import dotenv_values, find_dotenv
from pydantic import ValidationError

from ._constants import DEFAULT_CONFIG_FILE_PATH
from .errors import ConfigError
from .telemetry.log import LOG, bound_logging_vars, get_logging_contextvars, setup_logger
from .schema.config import OutboundConfig, filter_value_from_env, filter_value_from_yaml


def read_environ() -> dict[str, str]:
    """
    Process environment layered over a ``.env`` file found from the working directory.

    The ``.env`` values are read, never exported into ``os.environ``.
    """
    dotenv_vars = {
        key: value
        for key, value in dotenv_values(find_dotenv(usecwd=True)).items()
        if value is not None
    }
    return {**dotenv_vars, **os.environ}


def config_file_path(environ: Mapping[str, str] | None = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get("OUTBOUND_CONFIG_FILE", DEFAULT_CONFIG_FILE_PATH)


def load_config(path: str | None = None) -> OutboundConfig:
    """
    Build the configuration from the YAML file and ``OUTBOUND_*`` environment variables.

    Environment variables win over values from the YAML file, which win over defaults.
    """
    environ = read_environ()
    path = path or config_file_path(environ)
    if os.path.exists(path):
        with open(path) as f:
            yaml_string = f.read()
    else:
        LOG.debug("config file not found", extra={"config_file": path})
        yaml_string = ""

    yaml_vars = filter_value_from_yaml(yaml_string, OutboundConfig)
    env_vars = filter_value_from_env(OutboundConfig, environ=environ)
    try:
        return OutboundConfig(**{**yaml_vars, **env_vars})
    except ValidationError as exc:
        raise ConfigError(f"invalid outbound config: {exc}") from exc


@lru_cache(maxsize=1)
def get_config() -> OutboundConfig:
    return load_config()


def reset_config() -> None:
    get_config.cache_clear()


def configure_logging(stream: TextIO | None = None):
    """
    Route ``outbound`` log records to ``stream`` using the configured format and level.

    Nothing is printed until this is called; the logger only carries a ``NullHandler``.
    """
    config = get_config()
    return setup_logger(config.logging_format, config.logging_level.upper(), stream)


__all__ = [
    "LOG",
    "bound_logging_vars",
    "config_file_path",
    "configure_logging",
    "get_config",
    "get_logging_contextvars",
    "load_config",
    "read_environ",
    "reset_config",
]

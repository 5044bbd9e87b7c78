import os
import yaml
from pydantic import BaseModel
from typing import Literal, Mapping, Optional, Any, Type

from .._constants import DEFAULT_REQUEST_ID_HEADER, ENV_PREFIX


class OutboundConfig(BaseModel):
    # Logging Configuration
    logging_format: Literal["text", "json"] = "text"
    logging_level: str = "INFO"

    # Rendering Configuration
    body_format: Literal["json", "form"] = "json"
    user_agent: Optional[str] = None

    # Request correlation
    request_id: Optional[str] = None
    request_id_header: str = DEFAULT_REQUEST_ID_HEADER


def filter_value_from_env(
    CLS: Type[BaseModel],
    prefix: str = ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    environ = os.environ if environ is None else environ
    config_keys = CLS.model_fields.keys()
    env_already_keys = {}
    for key in config_keys:
        value = environ.get(f"{prefix}{key.upper()}", None)
        if value is None:
            continue
        env_already_keys[key] = value
    return env_already_keys


def filter_value_from_yaml(yaml_string, CLS: Type[BaseModel]) -> dict[str, Any]:
    yaml_config_data: dict | None = yaml.safe_load(yaml_string)
    if yaml_config_data is None:
        return {}

    yaml_already_keys = {}
    config_keys = CLS.model_fields.keys()
    for key in config_keys:
        value = yaml_config_data.get(key, None)
        if value is None:
            continue
        yaml_already_keys[key] = value
    return yaml_already_keys

"""
Configuration utilities for loading the provider config blob.
"""

import logging
import os
from pathlib import Path
from typing import IO, Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models import TencentCloudConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "TENCENTCLOUD_CLOUD_CONTROLLER_MANAGER_"

ENV_FALLBACK_FIELDS = ("region", "vpc_id", "secret_id", "secret_key", "cluster_route_table")

ConfigSource = Union[str, Path, IO[str], None]


def load_config(
    source: ConfigSource = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TencentCloudConfig:
    """
    Load provider configuration from a JSON or YAML blob with environment fallback.

    Args:
        source: Path to a config file, an open text stream, or ``None``
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        TencentCloudConfig: Configuration with empty fields filled from the environment

    Raises:
        ConfigurationError: If the blob cannot be read or parsed
    """
    data = _read_blob(source)
    env = os.environ if environ is None else environ

    for name in ENV_FALLBACK_FIELDS:
        if not data.get(name):
            value = env.get(f"{ENV_PREFIX}{name.upper()}")
            if value:
                data[name] = value

    try:
        return TencentCloudConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def parse_config_text(text: str) -> Dict[str, Any]:
    """Parse a config document; JSON is accepted since it is valid YAML."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing configuration: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )
    return data


def _read_blob(source: ConfigSource) -> Dict[str, Any]:
    if source is None:
        return {}
    if isinstance(source, (str, Path)):
        try:
            with open(source, "r") as file:
                text = file.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {source}: {e}") from e
        logger.debug(f"Loaded configuration from {source}")
        return parse_config_text(text)
    if hasattr(source, "read"):
        return parse_config_text(source.read())
    raise ConfigurationError(f"Unsupported configuration source: {source!r}")

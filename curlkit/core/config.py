"""
Configuration Management.

Loads settings from config/settings/*.yaml under the project root, the
nearest directory (walking up from the working directory) holding a
.project_root marker. Without a marker, or without a given file, the schema
defaults apply, so an installed CLI works from any directory.

Settings (YAML):
    transport.yaml - Transport binary and debug session query parameter
    logging.yaml   - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from curlkit.core.config_schema import LoggingSchema, TransportSchema
from curlkit.core.exceptions import ConfigurationError


def find_project_root(start: Path | None = None) -> Path | None:
    """Find project root by looking for .project_root marker file."""
    current = (start or Path.cwd()).resolve()
    while True:
        if (current / ".project_root").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_yaml_config(filename: str) -> dict[str, Any]:
    """
    Load a YAML configuration file from config/settings/.

    Returns an empty dict when there is no project root or no such file.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping.
    """
    project_root = find_project_root()
    if project_root is None:
        return {}

    config_path = project_root / "config" / "settings" / filename
    if not config_path.is_file():
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}:\n{e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid configuration in {filename}: expected a mapping")
    return data


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._transport = _load_validated(TransportSchema, "transport.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def transport(self) -> TransportSchema:
        """Transport tool settings."""
        return self._transport

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()

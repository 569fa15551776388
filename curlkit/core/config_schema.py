"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has wrong types or unknown fields, a clear ValidationError is raised at
startup instead of a cryptic KeyError deep in application code.

Every field has a default so the CLI runs without any settings files.

Each top-level class corresponds to one file in config/settings/:
    TransportSchema  → transport.yaml
    LoggingSchema    → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# transport.yaml
# =============================================================================


class DebugSessionSchema(_StrictBase):
    param: str = Field(default="XDEBUG_SESSION", min_length=1)
    value: str = "vscode"


class TransportSchema(_StrictBase):
    binary: str = Field(default="curl", min_length=1)
    debug_session: DebugSessionSchema = Field(default_factory=DebugSessionSchema)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/curlkit.jsonl"
    max_bytes: int = 5242880
    backup_count: int = 3


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json"] = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)

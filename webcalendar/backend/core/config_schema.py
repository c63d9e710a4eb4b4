"""
Configuration Schemas.

One strict Pydantic model per file in config/settings/. AppConfig validates
each YAML file against its model when configuration is first loaded, so a
typo in database.yaml stops the CLI with a readable error instead of
surfacing later as a failed connection.

    ApplicationSchema  -> application.yaml
    DatabaseSchema     -> database.yaml
    LoggingSchema      -> logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Unknown YAML keys are an error, not silently ignored."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    environment: str
    debug: bool


# =============================================================================
# database.yaml
# =============================================================================


class DatabaseSchema(_StrictBase):
    """
    PostgreSQL connection and pool settings.

    The password is not here; it comes from DB_PASSWORD in config/.env.
    """

    host: str
    port: int = Field(ge=1, le=65535)
    name: str
    user: str
    pool_size: int = Field(ge=1)
    max_overflow: int = Field(ge=0)
    pool_timeout: int = Field(ge=0)
    pool_recycle: int
    echo: bool
    connect_timeout: int = Field(ge=1)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int = Field(ge=1)
    backup_count: int = Field(ge=0)


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    handlers: HandlersSchema

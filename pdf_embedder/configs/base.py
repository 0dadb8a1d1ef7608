"""
Shared settings base for the PDF Embedder.

Reads `.env` and process environment for the options every entry point needs:
the log level applied by the CLI and the API lifespan, and the FastAPI debug flag.

Dependencies: pydantic_settings
System role: Parent class of the application Settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Options shared by the CLI and the HTTP API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for configure_logging (DEBUG, INFO, WARNING, ERROR)",
    )
    debug: bool = Field(
        default=False,
        description="Return tracebacks from the HTTP API on unhandled errors",
    )

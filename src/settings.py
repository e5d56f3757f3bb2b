"""Application settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

from loguru import logger
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Decoder configuration settings.

    Settings can be configured via:

    1. Environment variables (e.g., GREYMAP_MAX_FILE_SIZE=1048576)
    2. .env file in the working directory
    3. Default values defined below

    .. rubric:: Examples

    Reject files with bytes after the pixel data::

        export GREYMAP_STRICT_TRAILING_DATA=true
    """

    max_file_size: Annotated[
        int,
        Field(
            default=64 * 1024 * 1024,  # 64MB
            description="Maximum size in bytes of a file passed to the loader",
            gt=0,
        ),
    ]

    strict_trailing_data: Annotated[
        bool,
        Field(
            default=False,
            description="If True, bytes following the pixel data make decoding fail. "
            "If False, they are ignored.",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="GREYMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def app_version(self) -> str:
        """The installed package version, "0.0.0" when the package is not installed."""
        try:
            return version("greymap")
        except PackageNotFoundError:
            logger.warning("Could not determine package version, using fallback '0.0.0'")
            return "0.0.0"

    def log_startup_config(self) -> None:
        """Log the effective configuration."""
        logger.info("Configuration:")
        logger.info(f"  Version: {self.app_version}")
        logger.info(f"  Max file size: {self.max_file_size / 1024 / 1024:.1f}MB")
        logger.info(f"  Strict trailing data: {self.strict_trailing_data}")


@lru_cache
def get_settings() -> Settings:
    """
    Get the cached settings instance.

    :return: The settings read from the environment on first use.
    """
    return Settings()  # type: ignore

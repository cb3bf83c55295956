"""Load the TAXII client configuration.

The values come, in this order, from the keyword arguments, the environment
variables prefixed by TAXII2_ and a .env file in the working directory.

Examples:
    >>> # export TAXII2_URL=https://example.com TAXII2_USER=user TAXII2_PASSWORD=secret
    >>> settings = load_settings()
    >>> conn = TaxiiConnect.from_settings(settings)

"""

import logging
from datetime import timedelta
from logging import getLogger
from typing import Any, Literal

from pydantic import Field, HttpUrl, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from taxii2_connect.errors import ConfigValidationError

logger = getLogger(__name__)


class Taxii2Settings(BaseSettings):
    """Settings of a connection to a TAXII 2.0 server."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="TAXII2_",
        env_file=".env",
        extra="ignore",
    )

    url: HttpUrl = Field(description="The base URL of the TAXII server.")
    user: str = Field(description="The user name for basic authentication.")
    password: SecretStr = Field(description="The password for basic authentication.")
    timeout: timedelta = Field(
        default=timedelta(seconds=60),
        description="The total timeout of one request.",
    )
    cache_by_filter: bool = Field(
        default=False,
        description="Cache the objects and manifests of a Collection per filter.",
    )
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="error",
        description="The minimum level of the library logs.",
    )

    def configure_logging(self) -> None:
        """Set the level of the taxii2_connect loggers."""
        getLogger("taxii2_connect").setLevel(
            logging.getLevelName(self.log_level.upper())
        )


def load_settings(**overrides: Any) -> Taxii2Settings:
    """Load and validate the settings.

    Raises:
        ConfigValidationError: If a value is missing or invalid.

    """
    try:
        return Taxii2Settings(**overrides)
    except ValidationError as e:
        logger.error(f"Invalid TAXII2 configuration: {e}")
        raise ConfigValidationError("Error validating TAXII2 configuration.") from e

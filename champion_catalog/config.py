"""Configuration management for the Champion Catalog service."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlparse, urlunparse

from decouple import Choices
from decouple import config


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """Configuration for the Champion Catalog service."""

    # Required fields
    database_url: str
    access_token_secret: str
    aws_bucket_name: str
    aws_bucket_region: str

    # Overrides the database named in database_url when set
    database_name: str = ""

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Access tokens
    access_token_ttl_seconds: int = 3600

    # Object storage
    aws_access_key: str = ""
    aws_secret_access_key: str = ""
    aws_endpoint_url: str = ""

    # HTTP server configuration
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    http_client_max_size: int = 10 * 1024 * 1024

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        # Helper function to simplify config calls
        def get_config(key: str, default=None, cast=None):
            if default is not None:
                if cast is not None:
                    return config(key, default=default, cast=cast)
                else:
                    return config(key, default=default)
            else:
                return config(key)

        env = Environment(
            get_config("ENVIRONMENT", "development", Choices(["development", "CI", "production"]))
        )

        return cls(
            # Required
            database_url=get_config("DATABASE_URL"),
            access_token_secret=get_config("ACCESS_TOKEN_SECRET"),
            aws_bucket_name=get_config("AWS_BUCKET_NAME"),
            aws_bucket_region=get_config("AWS_BUCKET_REGION"),
            database_name=get_config("DATABASE_NAME", ""),
            # Environment
            environment=env,
            # Access tokens
            access_token_ttl_seconds=get_config("ACCESS_TOKEN_TTL_SECONDS", 3600, int),
            # Object storage
            aws_access_key=get_config("AWS_ACCESS_KEY", ""),
            aws_secret_access_key=get_config("AWS_SECRET_ACCESS_KEY", ""),
            aws_endpoint_url=get_config("AWS_ENDPOINT_URL", ""),
            # HTTP server
            http_host=get_config("HTTP_HOST", "0.0.0.0"),
            http_port=get_config("PORT", 8000, int),
            http_client_max_size=get_config("HTTP_CLIENT_MAX_SIZE", 10 * 1024 * 1024, int),
            # Logging
            log_level=get_config("LOG_LEVEL", "INFO", Choices(LOG_LEVELS)),
            log_format=get_config("LOG_FORMAT", "json", Choices(["json", "text"])),
        )

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == Environment.CI

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    def get_database_url(self) -> str:
        """Get the asyncpg URL the service and the migrations connect to."""
        return build_database_url(self.database_url, self.database_name)


def build_database_url(database_url: str, database_name: str = "") -> str:
    """Switch a PostgreSQL URL to the asyncpg driver.

    A non-empty ``database_name`` replaces the database named in the URL;
    otherwise the URL's own database is kept.
    """
    parsed = urlparse(database_url)

    # Ensure we have the asyncpg driver specified
    scheme = parsed.scheme
    if scheme in ("postgres", "postgresql", "postgresql+psycopg2"):
        scheme = "postgresql+asyncpg"

    path = f"/{database_name}" if database_name else parsed.path

    return urlunparse(
        (scheme, parsed.netloc, path, parsed.params, parsed.query, parsed.fragment)
    )


# Global configuration instance
_config: Optional[Config] = None


def init_config() -> Config:
    """Load configuration from the environment and store it process-wide."""
    global _config
    _config = Config.from_env()
    return _config


def get_config() -> Config:
    """Get the process-wide configuration."""
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call init_config() first.")
    return _config


def is_config_initialized() -> bool:
    return _config is not None


def reset_config() -> None:
    """Forget the process-wide configuration. Used by tests."""
    global _config
    _config = None

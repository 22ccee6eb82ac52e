from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from film_views.exceptions import ConfigurationException

BASE_DIR = Path(__file__).resolve().parent.parent  # film-views/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_STYLESHEET_URL = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working default so the app starts without a .env file.
    Values can be overridden via environment variables or a .env file.
    """

    # Server settings
    app_host: str = Field(default="127.0.0.1", min_length=1, description="Server host (e.g., '0.0.0.0')")
    app_port: int = Field(ge=1, le=65535, default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Presentation settings
    site_title: str = Field(default="Film Catalogue", min_length=1, description="Title shown on every page")
    stylesheet_url: str = Field(
        default=DEFAULT_STYLESHEET_URL,
        pattern=r"^https?://",
        description="Responsive stylesheet linked from the base template",
    )

    # Security settings
    trusted_hosts: str = Field(
        default="localhost,127.0.0.1,testserver",
        description="Comma-separated host patterns accepted by TrustedHostMiddleware",
    )
    cors_origins: str = Field(default="http://localhost:8000", description="Comma-separated CORS origins")
    rate_limit_default: str = Field(default="60/minute", description="Default slowapi rate limit per client IP")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,  # Validate defaults too
    )

    @property
    def trusted_host_list(self) -> list[str]:
        """Trusted host patterns as a list."""
        return [host.strip() for host in self.trusted_hosts.split(",") if host.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @field_validator("app_host", "site_title", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure text settings are not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("trusted_hosts", mode="after")
    @classmethod
    def validate_trusted_hosts(cls, v: str) -> str:
        """Ensure at least one trusted host is configured."""
        if not any(host.strip() for host in v.split(",")):
            raise ValueError("trusted_hosts must contain at least one host")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If environment or .env values fail validation
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            raise ConfigurationException(
                "Invalid configuration",
                details={"errors": [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]},
            ) from e
    return _settings_instance

"""Configuration for the search connection."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchConfig(BaseSettings):
    """Configuration for the search connection.

    All settings can be configured via environment variables with FLIPSEARCH_ prefix.

    Connection:
        - FLIPSEARCH_BASE_URL (or FLIPSEARCH_URL): search server base address
        - FLIPSEARCH_TIMEOUT: per-request timeout in seconds
        - FLIPSEARCH_VERIFY_CERTS: whether TLS certificates are verified
    """

    model_config = SettingsConfigDict(
        env_prefix="FLIPSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:9200",
        validation_alias=AliasChoices("base_url", "FLIPSEARCH_BASE_URL", "FLIPSEARCH_URL"),
    )
    timeout: float = Field(default=30.0, ge=1.0, le=300.0)
    verify_certs: bool = Field(
        default=True,
        description="Verify TLS certificates for https base URLs",
    )

    log_level: str = Field(default="INFO")

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format and strip trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

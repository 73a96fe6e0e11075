"""
Covenant configuration management using pydantic-settings.

Scoring tables are module constants in covenant.risk; settings cover the
service surface and the display thresholds for compliance bands.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    # Application Settings
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    api_prefix: str = Field(default="/api/v1", description="Prefix for API routes")

    # Security - CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Risk engine
    model_version: str = Field(
        default="1.0",
        description="Version tag reported with every risk assessment",
    )

    # Compliance band thresholds (percent)
    compliance_good_threshold: float = Field(
        default=95.0,
        description="Category percentage at or above which compliance is good",
    )
    compliance_warning_threshold: float = Field(
        default=85.0,
        description="Category percentage at or above which compliance is a warning",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_thresholds(self) -> "Settings":
        """Ensure compliance band thresholds are ordered percentages."""
        for name in ("compliance_good_threshold", "compliance_warning_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name.upper()} must be between 0 and 100")
        if self.compliance_warning_threshold > self.compliance_good_threshold:
            raise ValueError(
                "COMPLIANCE_WARNING_THRESHOLD must not exceed COMPLIANCE_GOOD_THRESHOLD"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Ensure critical settings are configured in production."""
        if self.environment == "production" and self.debug:
            raise ValueError("DEBUG must be False in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Global settings instance
settings = Settings()

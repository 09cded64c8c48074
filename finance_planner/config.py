"""Application configuration management using Pydantic Settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from finance_planner.models.retirement import RetirementAssumptions

_DEFAULT_ASSUMPTIONS = RetirementAssumptions()


class Settings(BaseSettings):
    """Planner settings loaded from environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Flask Configuration
    secret_key: str = Field(..., alias="SECRET_KEY")
    flask_env: str = Field(default="development", alias="FLASK_ENV")

    # Saved profiles
    storage_type: str = Field(default="local", alias="STORAGE_TYPE")
    storage_base_path: str = Field(default="storage", alias="STORAGE_BASE_PATH")
    s3_bucket_name: Optional[str] = Field(default=None, alias="S3_BUCKET_NAME")
    s3_region_name: str = Field(default="ap-south-1", alias="S3_REGION_NAME")
    s3_access_key_id: Optional[str] = Field(default=None, alias="S3_ACCESS_KEY_ID")
    s3_secret_access_key: Optional[str] = Field(
        default=None, alias="S3_SECRET_ACCESS_KEY"
    )
    s3_prefix: str = Field(default="", alias="S3_PREFIX")

    # Product catalog: a file path, or a key in the profile storage.
    # Neither set means the snapshot bundled with the package.
    catalog_path: Optional[str] = Field(default=None, alias="CATALOG_PATH")
    catalog_storage_key: Optional[str] = Field(default=None, alias="CATALOG_STORAGE_KEY")

    # Retirement projection
    inflation_rate: float = Field(
        default=_DEFAULT_ASSUMPTIONS.inflation_rate, alias="INFLATION_RATE"
    )
    expected_return: float = Field(
        default=_DEFAULT_ASSUMPTIONS.expected_return, alias="EXPECTED_RETURN"
    )
    epf_return: float = Field(default=_DEFAULT_ASSUMPTIONS.epf_return, alias="EPF_RETURN")
    life_expectancy: int = Field(
        default=_DEFAULT_ASSUMPTIONS.life_expectancy, alias="LIFE_EXPECTANCY"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Reject an empty or placeholder SECRET_KEY."""
        if not v or v == "your-secret-key-here-change-in-production":
            raise ValueError("SECRET_KEY must be set to a secure value")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        allowed_envs = {"development", "testing", "production"}
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("storage_type")
    @classmethod
    def validate_storage_type(cls, v):
        allowed_types = {"local", "s3"}
        if v not in allowed_types:
            raise ValueError(f"STORAGE_TYPE must be one of {allowed_types}")
        return v

    @field_validator("inflation_rate", "expected_return", "epf_return")
    @classmethod
    def validate_rate(cls, v):
        """Rates are annual fractions, e.g. 0.06 for 6%."""
        if not 0 <= v <= 0.5:
            raise ValueError("Annual rates must be fractions between 0 and 0.5")
        return v

    def retirement_assumptions(self) -> RetirementAssumptions:
        """Retirement assumptions with any configured overrides applied."""
        return RetirementAssumptions(
            inflation_rate=self.inflation_rate,
            expected_return=self.expected_return,
            epf_return=self.epf_return,
            life_expectancy=self.life_expectancy,
        )


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings, optionally from a specific env file."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create the process-wide settings."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Forget the process-wide settings so the next access reloads them."""
    global _settings
    _settings = None

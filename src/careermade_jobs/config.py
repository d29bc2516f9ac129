"""Configuration management for the CareerMade listing engine."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CAREERMADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Listing Configuration
    page_size: int = Field(5, description="Postings shown per listing page")
    salary_unit: int = Field(100_000, description="Currency units per LPA step used by salary filters")
    currency_symbol: str = Field("₹", description="Currency symbol for salary labels")

    # Application Configuration
    debug: bool = Field(False, description="Enable debug mode")
    log_level: str = Field("INFO", description="Logging level")


# Global settings instance
settings = Settings()

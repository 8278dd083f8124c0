"""Configuration for Code-Verify."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment."""

    host: str = "0.0.0.0"
    port: int = Field(
        default=5000,
        validation_alias=AliasChoices("CODE_VERIFY_PORT", "PORT"),
    )
    cors_origins: list[str] = ["*"]
    api_base_url: str = "http://localhost:5000"
    request_timeout: float = 10.0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CODE_VERIFY_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()

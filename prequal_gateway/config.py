"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "prequal-gateway"
    log_level: str = "INFO"

    # Repayment schedule rows returned when the caller gives no limit
    schedule_preview_months: int = 6


settings = Settings()

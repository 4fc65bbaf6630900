"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_format: str = "json"  # 'json' or 'text'
    log_level: str = "INFO"
    service_name: str = "device-age-monitor"

    # Age monitor tick
    monitor_check_enabled: bool = True
    # Crossings only fire within 20 minutes of the hour, so keep this well below 60
    monitor_check_interval_minutes: int = 5
    enabled_monitors: list[str] = ["lage", "mage"]

    # Testing
    testing: bool = False


settings = Settings()

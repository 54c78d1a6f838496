from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    telegram_bot_token: str = Field(min_length=1)
    telegram_webhook_url: str | None = None
    telegram_webhook_secret: str | None = None

    webhook_host: str = "0.0.0.0"
    webhook_port: int = 8080

    reply_audio_path: Path = Path("reply.ogg")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def use_webhook(self) -> bool:
        return bool(self.telegram_webhook_url)


def get_settings() -> Settings:
    """Load settings from the environment.

    Raises pydantic.ValidationError when TELEGRAM_BOT_TOKEN is not set or
    a value such as LOG_LEVEL is invalid.
    """
    return Settings()  # pyright: ignore[reportCallIssue]

import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from loguru import logger as log
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


__version__ = "0.1.0"


class Settings(BaseSettings):
    # Network settings
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    # Upstream model
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    model_name: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")

    # CORS header values, sent on every response
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "POST, GET, OPTIONS"
    cors_allow_headers: str = "Content-Type, Authorization"

    # Logging
    log_lvl: str = "INFO"
    log_path: Path = Path("logs/app.log")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_headers(self) -> dict:
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }


@lru_cache()
def get_logger(log_path: Path, level: str):
    log.remove()
    log.add(sys.stderr, format="{time} | {level} | {message}", level=level)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    log.add(
        log_path,
        format="{time} | {level} | {message}",
        level="DEBUG",
        rotation="1 days",
        retention="30 days",
        catch=True,
    )
    return log


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
logger = get_logger(settings.log_path, settings.log_lvl)

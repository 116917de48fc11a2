"""
Configuration settings for the browser task agent
"""
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Browser Configuration
    headless: bool = True  # HEADLESS=false 时显示浏览器窗口，其余取值一律 headless
    viewport_width: int = 1280
    viewport_height: int = 720

    # Executor Configuration
    extract_preview_chars: int = 500  # extract 结果在日志中展示的字符数

    # Logging Configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None  # 例如 logs/agent_{time}.log，为空则只输出到控制台

    @field_validator("headless", mode="before")
    @classmethod
    def _parse_headless(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower() != "false"
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()

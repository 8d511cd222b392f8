"""
應用程式設定

使用 Pydantic BaseSettings 管理環境變數和配置
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """
    應用程式設定

    從環境變數和 .env 文件讀取設定

    Attributes:
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL，不分大小寫)
        max_workers: 建立佔用圖的並行執行緒數（1=序列處理）
        partition_size: 分區建立時每個分區的宣告數量
        history_dir: 歷史檔案所在目錄，預設為目前工作目錄
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FABRIC_",
        case_sensitive=False,
    )

    # 日誌設定
    log_level: LogLevel = "INFO"

    # 佔用圖建立設定
    max_workers: int = Field(default=1, ge=1)
    partition_size: int = Field(default=256, ge=1)

    # 歷史記錄設定
    history_dir: Path | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


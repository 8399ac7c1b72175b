# sigil/config.py
"""
全局配置系统

所有配置项均可通过 SIGIL_ 前缀的环境变量或 .env 文件覆盖，例如：
    SIGIL_LOG_LEVEL=DEBUG
    SIGIL_STRICT_FIELDS=false
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SigilSettings(BaseSettings):
    # ================= 1. Signature (签名/字段定义) =================
    strict_fields: bool = Field(
        default=True,
        description="同一字段列表内是否拒绝重复的 name / title",
    )

    # ================= 2. Extraction (提取与校验) =================
    error_preview_length: int = Field(
        default=200,
        ge=20,
        description="错误详情中原始值预览的最大字符数",
    )

    # ================= 3. System (系统层) =================
    log_level: str = Field(default="INFO", description="日志级别")
    log_format: Literal["text", "json"] = Field(default="text", description="日志格式")

    model_config = SettingsConfigDict(
        env_prefix="SIGIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return v.upper()


# Singleton
_default_settings: Optional[SigilSettings] = None

def get_settings(force_reload: bool = False) -> SigilSettings:
    global _default_settings
    if _default_settings is None or force_reload:
        _default_settings = SigilSettings()
    return _default_settings

def configure_settings(**overrides) -> SigilSettings:
    global _default_settings
    _default_settings = SigilSettings(**overrides)
    return _default_settings

def reset_settings():
    global _default_settings
    _default_settings = None

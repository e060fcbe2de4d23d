"""统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口,各模块只消费 Settings.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- 环境变量统一使用 `PARAMS_SANITIZER_` 前缀,例如 `PARAMS_SANITIZER_STRICT=true`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from params_sanitizer.constants import LogLevel

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

APP_NAME = "params-sanitizer"
APP_VERSION = "1.0.0"
DEFAULT_LOG_LEVEL = LogLevel.INFO.value


class Settings(BaseSettings):
    """运行时设置集合."""

    model_config = SettingsConfigDict(
        env_prefix="PARAMS_SANITIZER_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    app_name: str = APP_NAME
    app_version: str = APP_VERSION

    # 未显式传入 strict 时 ParamsSanitizer 使用的默认值
    strict: bool = Field(default=False)

    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    enable_debug_log: bool = Field(default=False)
    log_json: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _check_log_level(self) -> Settings:
        allowed = {level.value for level in LogLevel}
        if self.log_level not in allowed:
            joined = "/".join(sorted(allowed))
            raise ValueError(f"配置校验失败: LOG_LEVEL 仅支持 {joined}")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """返回进程内共享的 Settings 实例."""
    return Settings.load()

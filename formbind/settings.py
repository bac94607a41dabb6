"""formbind - 统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口,避免散落在各模块中重复解析.
- `init_form_binding(app, settings=...)` 只消费 Settings,不再直接读取环境变量.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- 请求体大小与表单内存上限交由 werkzeug 执行,这里只负责给出配置值.
"""

from __future__ import annotations

import json
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from formbind.constants import HttpMethod

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

APP_NAME = "formbind"
APP_VERSION = "0.1.0"

DEFAULT_MAX_CONTENT_LENGTH_BYTES = 16 * 1024 * 1024
DEFAULT_MAX_FORM_MEMORY_SIZE_BYTES = 10 * 1024 * 1024


def _parse_csv(raw: str) -> tuple[str, ...]:
    parts = [item.strip() for item in raw.split(",")]
    return tuple(item for item in parts if item)


class Settings(BaseSettings):
    """表单绑定运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        # `FORMBIND_MUTATING_METHODS` 使用逗号分隔, 关闭自动 JSON 解码交由 validator 解析。
        enable_decoding=False,
    )

    max_content_length_bytes: int = Field(
        default=DEFAULT_MAX_CONTENT_LENGTH_BYTES,
        validation_alias="FORMBIND_MAX_CONTENT_LENGTH",
    )
    max_form_memory_size_bytes: int = Field(
        default=DEFAULT_MAX_FORM_MEMORY_SIZE_BYTES,
        validation_alias="FORMBIND_MAX_FORM_MEMORY_SIZE",
    )
    mutating_methods: tuple[str, ...] = Field(
        default=HttpMethod.BODY_FORM_METHODS,
        validation_alias="FORMBIND_MUTATING_METHODS",
    )
    enable_debug_log: bool = Field(default=False, validation_alias="FORMBIND_ENABLE_DEBUG_LOG")

    @field_validator("mutating_methods", mode="before")
    @classmethod
    def _parse_methods(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            raw = value.strip()
            if raw.startswith("["):
                parsed = json.loads(raw)
                if not isinstance(parsed, list):
                    raise ValueError("must be a JSON array or a comma-separated string")
                return tuple(item.upper() for item in (str(v).strip() for v in parsed) if item)
            return tuple(item.upper() for item in _parse_csv(raw))
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(text.upper() for text in (str(item).strip() for item in value) if text)
        return value

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _validate(self) -> Settings:
        """执行跨字段校验,统一抛出可读的 ValueError."""
        unknown_methods = sorted(set(self.mutating_methods) - set(HttpMethod.ALL))
        checks: list[tuple[str, bool]] = [
            ("FORMBIND_MAX_CONTENT_LENGTH 必须为正整数(字节)", self.max_content_length_bytes <= 0),
            ("FORMBIND_MAX_FORM_MEMORY_SIZE 必须为正整数(字节)", self.max_form_memory_size_bytes <= 0),
            ("FORMBIND_MUTATING_METHODS 不能为空", not self.mutating_methods),
            (f"FORMBIND_MUTATING_METHODS 包含未知方法: {', '.join(unknown_methods)}", bool(unknown_methods)),
        ]
        errors = [message for message, condition in checks if condition]
        if errors:
            raise ValueError("; ".join(errors))
        return self

    def to_flask_config(self) -> dict[str, object]:
        """转换为 Flask app.config 可写入的配置字典."""
        return {
            "MAX_CONTENT_LENGTH": self.max_content_length_bytes,
            "MAX_FORM_MEMORY_SIZE": self.max_form_memory_size_bytes,
            "FORMBIND_MUTATING_METHODS": self.mutating_methods,
            "FORMBIND_ENABLE_DEBUG_LOG": self.enable_debug_log,
        }


__all__ = ["APP_NAME", "APP_VERSION", "Settings"]

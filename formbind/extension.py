"""formbind - Flask 集成.

在应用工厂中调用 ``init_form_binding(app)``:
- 写入请求体/表单内存上限(由 werkzeug 在解析表单时执行);
- 配置 structlog;
- 注册 ``FormBindingError`` 错误处理器, 输出统一错误响应.

视图中调用 ``bind_request(LoginForm)`` 即可得到绑定后的 dataclass 实例.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from flask import current_app, request

from formbind.binding.entrypoints import allocate_and_bind
from formbind.constants import HttpMethod
from formbind.errors import FormBindingError
from formbind.settings import Settings
from formbind.utils.response_utils import jsonify_unified_error
from formbind.utils.structlog_config import configure_structlog, get_logger

if TYPE_CHECKING:
    from flask import Flask, Response

EXTENSION_KEY = "formbind"

RecordT = TypeVar("RecordT")

logger = get_logger("form_binding")


def init_form_binding(app: Flask, settings: Settings | None = None) -> Settings:
    """在 Flask 应用上启用表单绑定.

    Args:
        app: Flask 应用实例.
        settings: 绑定设置, 缺省时从环境变量加载.

    Returns:
        Settings: 实际生效的设置.

    """
    resolved = settings or Settings.load()
    app.config.update(resolved.to_flask_config())
    app.extensions[EXTENSION_KEY] = resolved
    configure_structlog(app)
    app.register_error_handler(FormBindingError, _handle_form_binding_error)
    return resolved


def _handle_form_binding_error(error: FormBindingError) -> tuple[Response, int]:
    if not error.recoverable:
        logger.error(
            "表单绑定声明错误",
            module="form_binding",
            error_kind=error.kind.value,
            field=error.field,
            message=error.message,
        )
    return jsonify_unified_error(error)


def bind_request(record_type: type[RecordT]) -> RecordT:
    """把当前请求的表单绑定到新的 dataclass 实例.

    Args:
        record_type: dataclass 类型.

    Returns:
        绑定完成的实例.

    """
    settings = current_app.extensions.get(EXTENSION_KEY)
    mutating_methods = settings.mutating_methods if settings is not None else HttpMethod.BODY_FORM_METHODS
    return allocate_and_bind(record_type, request, mutating_methods=mutating_methods)


__all__ = ["EXTENSION_KEY", "bind_request", "init_form_binding"]

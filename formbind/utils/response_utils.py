"""formbind - 统一响应工具.

把绑定异常转换为统一的错误响应结构,避免在视图层散落 JSON 拼装逻辑.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from flask import Response, jsonify

from formbind.constants import HttpStatus
from formbind.errors import AppError, FormBindingError, map_exception_to_status

if TYPE_CHECKING:
    from collections.abc import Mapping


def unified_error_response(
    error: Exception,
    *,
    status_code: int | None = None,
    extra: Mapping[str, object] | None = None,
) -> tuple[dict[str, object], int]:
    """生成统一的错误响应载荷.

    Args:
        error: 异常对象.
        status_code: HTTP 状态码,可选,默认根据异常类型自动映射.
        extra: 额外的错误信息,可选.

    Returns:
        包含两个元素的元组:
        - 错误响应载荷字典
        - HTTP 状态码

    """
    payload: dict[str, object] = {
        "success": False,
        "error": True,
        "message": str(error),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if isinstance(error, AppError):
        payload["message"] = error.message
        payload["message_key"] = error.message_key
        payload["category"] = error.category.value
        payload["severity"] = error.severity.value
        payload["recoverable"] = error.recoverable
    if isinstance(error, FormBindingError):
        payload["error_kind"] = error.kind.value
        payload["field"] = error.field
    if extra:
        payload["extra"] = dict(extra)
    final_status = status_code or map_exception_to_status(error, default=HttpStatus.INTERNAL_SERVER_ERROR)
    return payload, final_status


def jsonify_unified_error(error: Exception, **kwargs: object) -> tuple[Response, int]:
    """返回 Flask Response 对象的错误响应便捷函数."""
    payload, status = unified_error_response(error, **kwargs)  # type: ignore[arg-type]
    return jsonify(payload), status


__all__ = ["jsonify_unified_error", "unified_error_response"]

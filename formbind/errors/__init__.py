"""formbind - 统一异常定义.

集中维护绑定异常类型、错误种类、严重度与 HTTP 状态码映射.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from werkzeug.exceptions import HTTPException

from formbind.constants import HttpStatus
from formbind.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str

    @property
    def default_message(self) -> str:
        """根据 message key 获取默认文案.

        Returns:
            str: 对应 `ErrorMessages` 中的默认消息.

        """
        return getattr(ErrorMessages, self.default_message_key, ErrorMessages.INTERNAL_ERROR)


class AppError(Exception):
    """统一的基础业务异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: 自定义消息键.
        extra: 结构化日志附加字段.
        severity: 错误严重度.
        category: 错误分类.
        status_code: 覆盖默认 HTTP 状态码.

    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: Mapping[str, object] | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self.severity = severity or self.metadata.severity
        self.category = category or self.metadata.category
        self.status_code = int(status_code or self.metadata.status_code)
        super().__init__(self.message)

    @property
    def recoverable(self) -> bool:
        """表示该异常是否可恢复.

        Returns:
            bool: 严重度为 LOW 或 MEDIUM 时为 True.

        """
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """表示输入参数或请求体验证失败.

    常用于表单校验、必填字段缺失等场景,默认返回 400.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class FieldErrorKind(Enum):
    """表单绑定错误种类."""

    INVALID_DESTINATION = "invalid_destination"
    TYPE_PARAMETER_NOT_RECORD = "type_parameter_not_record"
    UNADDRESSABLE_FIELD = "unaddressable_field"
    UNSUPPORTED_TYPE = "unsupported_type"
    FIELD_REQUIRED = "field_required"
    MUST_NOT_BE_EMPTY = "must_not_be_empty"
    REQUIRED_WITH_DEFAULT_CONFLICT = "required_with_default_conflict"
    VALUE_PARSING_ERROR = "value_parsing_error"

    @property
    def message_key(self) -> str:
        """对应 `ErrorMessages` 中的消息键."""
        return self.name

    @property
    def is_client_error(self) -> bool:
        """是否由客户端提交的表单内容引起(其余种类属于调用方的声明错误)."""
        return self in _CLIENT_ERROR_KINDS


_CLIENT_ERROR_KINDS = frozenset(
    {
        FieldErrorKind.FIELD_REQUIRED,
        FieldErrorKind.MUST_NOT_BE_EMPTY,
        FieldErrorKind.VALUE_PARSING_ERROR,
    },
)


class FormBindingError(AppError):
    """表单绑定失败.

    客户端输入导致的错误(必填缺失/不能为空/解析失败)默认返回 400,
    目标类型声明错误(不可写字段/不支持的类型/互斥选项等)默认返回 500.

    Attributes:
        kind: 错误种类.
        field: 出错的 dataclass 字段名,可为空.
        value: 出错的原始表单值,可为空.

    """

    def __init__(
        self,
        kind: FieldErrorKind,
        *,
        field: str | None = None,
        value: str | None = None,
        detail: str | None = None,
    ) -> None:
        """初始化绑定异常.

        Args:
            kind: 错误种类.
            field: 出错字段名.
            value: 出错的原始表单值.
            detail: 附加说明,例如解析失败原因.

        """
        if kind.is_client_error:
            self.metadata = ValidationError.metadata
        self.kind = kind
        self.field = field
        self.value = value
        self.detail = detail
        extra: dict[str, object] = {"error_kind": kind.value}
        if field is not None:
            extra["field"] = field
        if value is not None:
            extra["value"] = value
        super().__init__(
            self._format_message(kind, field, detail),
            message_key=kind.message_key,
            extra=extra,
        )

    @staticmethod
    def _format_message(kind: FieldErrorKind, field: str | None, detail: str | None) -> str:
        message = "字段 "
        if field:
            message += f"{field} "
        message += f"错误: {getattr(ErrorMessages, kind.message_key)}"
        if detail:
            message += f": {detail}"
        return message


class InvalidDestinationError(FormBindingError):
    """绑定目标不是 dataclass 实例."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(FieldErrorKind.INVALID_DESTINATION, detail=detail)


class TypeParameterNotRecordError(FormBindingError):
    """allocate_and_bind 的类型参数不是 dataclass 类型."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(FieldErrorKind.TYPE_PARAMETER_NOT_RECORD, detail=detail)


def map_exception_to_status(error: Exception, default: int = HttpStatus.INTERNAL_SERVER_ERROR) -> int:
    """根据异常类型推导 HTTP 状态码.

    Args:
        error: 捕获到的异常对象.
        default: 无法匹配时的默认状态码.

    Returns:
        int: 与异常对应的 HTTP 状态码.

    """
    if isinstance(error, AppError):
        return error.status_code

    if isinstance(error, HTTPException):
        code = getattr(error, "code", None)
        if code is not None:
            return int(code)

    return int(default)


__all__ = [
    "AppError",
    "ExceptionMetadata",
    "FieldErrorKind",
    "FormBindingError",
    "InvalidDestinationError",
    "TypeParameterNotRecordError",
    "ValidationError",
    "map_exception_to_status",
]

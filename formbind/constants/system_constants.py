"""formbind - 常量定义模块

统一管理错误分类、严重度与错误消息文案.
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"

    # 绑定目标错误
    INVALID_DESTINATION = "绑定目标必须是 dataclass 实例"
    TYPE_PARAMETER_NOT_RECORD = "类型参数必须是 dataclass 类型"
    UNADDRESSABLE_FIELD = "字段不可写"
    UNSUPPORTED_TYPE = "字段类型不支持, 仅支持 bool/int/float/str、其序列、dataclass 或可选 dataclass"
    REQUIRED_WITH_DEFAULT_CONFLICT = "字段同时声明了互斥的 required 与 default 选项"

    # 表单输入错误
    FIELD_REQUIRED = "缺少必填表单字段"
    MUST_NOT_BE_EMPTY = "表单字段不能为空"
    VALUE_PARSING_ERROR = "表单字段值解析失败"

"""常量模块。

集中管理表单绑定相关的系统常量，包括错误消息、HTTP 方法与状态码等。

主要常量：
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
- HttpMethod: HTTP 方法常量
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

# 导入HTTP方法常量
from .http_methods import HttpMethod

# 导入所有系统常量
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
)

__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "HttpMethod",
    "HttpStatus",
]

"""formbind - 声明式 HTTP 表单到 dataclass 的绑定.

示例:

    @dataclass
    class LoginForm:
        username: str = form_field("username,required,notempty", method="POST")
        password: str = form_field("password,required,notempty", method="POST")
        remember: bool = form_field("remember", method="POST")

    form = allocate_and_bind(LoginForm, request)
"""

from formbind.binding import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    allocate_and_bind,
    bind_into,
    bind_values,
    form_field,
)
from formbind.errors import (
    FieldErrorKind,
    FormBindingError,
    InvalidDestinationError,
    TypeParameterNotRecordError,
)
from formbind.extension import bind_request, init_form_binding
from formbind.settings import APP_VERSION as __version__
from formbind.settings import Settings

__all__ = [
    "FieldErrorKind",
    "Float32",
    "Float64",
    "FormBindingError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidDestinationError",
    "Settings",
    "TypeParameterNotRecordError",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "__version__",
    "allocate_and_bind",
    "bind_into",
    "bind_request",
    "bind_values",
    "form_field",
    "init_form_binding",
]

"""表单绑定入口.

- ``bind_into``: 绑定到调用方已创建的 dataclass 实例.
- ``allocate_and_bind``: 按 dataclass 类型分配零值实例后绑定并返回.
- ``bind_values``: 绑定已解析的 MultiDict(不依赖请求对象).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

from formbind.binding.binder import bind_struct
from formbind.binding.form_source import MultiDictFormSource, RequestFormSource
from formbind.binding.kinds import is_record_instance, is_record_type
from formbind.binding.schema import zero_value
from formbind.constants import HttpMethod
from formbind.errors import InvalidDestinationError, TypeParameterNotRecordError

if TYPE_CHECKING:
    from werkzeug.datastructures import MultiDict
    from werkzeug.wrappers import Request

RecordT = TypeVar("RecordT")


def bind_into(
    request: Request,
    destination: RecordT,
    *,
    mutating_methods: Iterable[str] = HttpMethod.BODY_FORM_METHODS,
) -> RecordT:
    """把请求表单绑定到已有的 dataclass 实例.

    Args:
        request: werkzeug/Flask 请求对象.
        destination: 非空的 dataclass 实例, 原地修改.
        mutating_methods: 只读取 body 表单的请求方法.

    Returns:
        绑定后的 ``destination``(同一对象).

    Raises:
        InvalidDestinationError: destination 不是 dataclass 实例, 此时不会读取请求.
        FormBindingError: 字段绑定失败.
        werkzeug.exceptions.HTTPException: 表单解析失败(例如请求体超限)时原样抛出.

    """
    if not is_record_instance(destination):
        raise InvalidDestinationError(f"收到 {type(destination).__name__}")

    source = RequestFormSource(request, mutating_methods=mutating_methods)
    source.ensure_parsed()
    bind_struct(source, destination)
    return destination


def allocate_and_bind(
    record_type: type[RecordT],
    request: Request,
    *,
    mutating_methods: Iterable[str] = HttpMethod.BODY_FORM_METHODS,
) -> RecordT:
    """分配 dataclass 零值实例并绑定请求表单.

    Args:
        record_type: dataclass 类型.
        request: werkzeug/Flask 请求对象.
        mutating_methods: 只读取 body 表单的请求方法.

    Returns:
        绑定完成的新实例.

    Raises:
        TypeParameterNotRecordError: record_type 不是 dataclass 类型, 在读取请求前抛出.

    """
    if not is_record_type(record_type):
        raise TypeParameterNotRecordError(f"收到 {record_type!r}")

    destination = zero_value(record_type)
    return bind_into(request, destination, mutating_methods=mutating_methods)


def bind_values(values: MultiDict[str, str], destination: RecordT, method: str) -> RecordT:
    """把已解析的表单值绑定到 dataclass 实例."""
    if not is_record_instance(destination):
        raise InvalidDestinationError(f"收到 {type(destination).__name__}")

    bind_struct(MultiDictFormSource(values, method), destination)
    return destination


__all__ = ["allocate_and_bind", "bind_into", "bind_values"]

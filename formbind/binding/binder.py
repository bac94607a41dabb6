"""dataclass 递归绑定器.

按声明顺序遍历 dataclass 字段:
1. 方法不匹配的字段直接跳过(不读取、不校验).
2. 嵌套 dataclass / 可选 dataclass 字段对其自身实例独立递归绑定, 可选字段为 None 时先分配零值实例.
   自引用类型的可选字段若为 None 且该类型已在当前递归路径上, 保持 None 不再展开.
3. 动态类型字段(Any/object/联合类型)一律报 UNSUPPORTED_TYPE.
4. 其余叶子字段: 跳过标记 -> required/default 互斥 -> 取值 -> required/default/空值 -> notempty -> 转换 -> 写入.

绑定是 fail-fast 的: 首个错误立即中止, 已写入的字段不回滚.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formbind.binding.coercion import coerce_field
from formbind.binding.kinds import FieldKind, is_record_instance
from formbind.binding.method_filter import is_method_eligible
from formbind.binding.schema import FieldDescriptor, get_record_schema, zero_value
from formbind.errors import FieldErrorKind, FormBindingError
from formbind.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from formbind.binding.form_source import FormValueSource

logger = get_logger("form_binding")


def bind_struct(source: FormValueSource, destination: Any) -> None:
    """把表单值绑定到 dataclass 实例.

    Args:
        source: 表单值来源.
        destination: 待填充的 dataclass 实例, 原地修改.

    Raises:
        FormBindingError: 首个绑定错误.

    """
    try:
        _bind_record(source, destination, ())
    except FormBindingError as exc:
        logger.debug(
            "表单绑定失败",
            module="form_binding",
            record=type(destination).__name__,
            method=source.method,
            error_kind=exc.kind.value,
            field=exc.field,
        )
        raise


def _bind_record(source: FormValueSource, destination: Any, path: tuple[Any, ...]) -> None:
    schema = get_record_schema(type(destination))
    path = (*path, destination)
    for descriptor in schema.fields:
        if not is_method_eligible(descriptor.methods, source.method):
            # 例如 method="POST" 的字段在 GET 请求中保持零值
            continue
        if descriptor.is_record:
            _bind_nested(source, destination, descriptor, path)
            continue
        if descriptor.kind is FieldKind.DYNAMIC:
            raise FormBindingError(
                FieldErrorKind.UNSUPPORTED_TYPE,
                field=descriptor.attr_name,
                detail="字段类型必须是 bool/int/float/str、其序列、dataclass 或可选 dataclass",
            )
        _bind_leaf(source, destination, descriptor)


def _bind_nested(
    source: FormValueSource,
    destination: Any,
    descriptor: FieldDescriptor,
    path: tuple[Any, ...],
) -> None:
    if not descriptor.settable:
        raise FormBindingError(FieldErrorKind.UNADDRESSABLE_FIELD, field=descriptor.attr_name)

    nested = getattr(destination, descriptor.attr_name, None)
    if nested is None:
        record_type = descriptor.type_info.record_type
        if any(type(ancestor) is record_type for ancestor in path):
            return
        nested = zero_value(record_type)
        setattr(destination, descriptor.attr_name, nested)
    elif not is_record_instance(nested):
        raise FormBindingError(
            FieldErrorKind.UNSUPPORTED_TYPE,
            field=descriptor.attr_name,
            detail=f"字段当前值 {type(nested).__name__} 不是 dataclass 实例",
        )
    if any(ancestor is nested for ancestor in path):
        # 对象图成环
        return
    _bind_record(source, nested, path)


def _bind_leaf(source: FormValueSource, destination: Any, descriptor: FieldDescriptor) -> None:
    spec = descriptor.spec
    if spec is None or spec.skip:
        return
    if spec.conflicting:
        raise FormBindingError(FieldErrorKind.REQUIRED_WITH_DEFAULT_CONFLICT, field=descriptor.attr_name)

    raw_values, present = source.lookup(spec.name)
    if not present:
        if spec.required:
            raise FormBindingError(FieldErrorKind.FIELD_REQUIRED, field=descriptor.attr_name)
        raw_values = [spec.default_literal] if spec.has_default else [""]
    elif spec.not_empty and raw_values[0] == "":
        raise FormBindingError(FieldErrorKind.MUST_NOT_BE_EMPTY, field=descriptor.attr_name, value="")

    if not descriptor.settable:
        raise FormBindingError(FieldErrorKind.UNADDRESSABLE_FIELD, field=descriptor.attr_name)
    value = coerce_field(descriptor.attr_name, descriptor.type_info, raw_values)
    setattr(destination, descriptor.attr_name, value)


__all__ = ["bind_struct"]

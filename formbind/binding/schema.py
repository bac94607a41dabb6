"""dataclass 绑定描述表.

每个 dataclass 类型只解析一次字段声明, 生成 ``RecordSchema`` 并缓存:
字段顺序、类型种类、方法限制与 ``FieldSpec`` 全部在这里确定, 绑定过程中不再重复解析.

字段声明写在 dataclass 字段元数据中:

    @dataclass
    class LoginForm:
        username: str = form_field("username,required,notempty", method="POST")
        remember: bool = form_field("remember")
"""

from __future__ import annotations

import dataclasses
from dataclasses import MISSING, dataclass
from functools import lru_cache
from typing import Any, get_type_hints

from formbind.binding.field_spec import FieldSpec, parse_field_spec
from formbind.binding.kinds import FieldKind, TypeInfo, classify, is_record_type
from formbind.binding.method_filter import MethodRestriction, parse_method_restriction
from formbind.errors import FieldErrorKind, FormBindingError

FORM_TAG = "form"
METHOD_TAG = "method"

_RECORD_KINDS = frozenset({FieldKind.RECORD, FieldKind.OPTIONAL_RECORD})


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """单个字段的绑定描述.

    Attributes:
        attr_name: dataclass 字段名.
        type_info: 归一化后的类型描述.
        methods: 方法限制, None 表示对所有方法生效.
        spec: 字段声明解析结果, 嵌套 dataclass 字段为 None.
        settable: 字段能否单独写入(所属 dataclass 非 frozen 且字段名不以下划线开头).

    """

    attr_name: str
    type_info: TypeInfo
    methods: MethodRestriction | None
    spec: FieldSpec | None
    settable: bool

    @property
    def kind(self) -> FieldKind:
        return self.type_info.kind

    @property
    def is_record(self) -> bool:
        return self.type_info.kind in _RECORD_KINDS


@dataclass(frozen=True, slots=True)
class RecordSchema:
    """dataclass 类型的绑定描述表."""

    record_type: type
    fields: tuple[FieldDescriptor, ...]
    frozen: bool


def form_field(
    tag: str = "",
    *,
    method: str | None = None,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    **kwargs: Any,
) -> Any:
    """声明一个参与表单绑定的 dataclass 字段.

    Args:
        tag: 字段声明, 例如 ``"username,required,notempty"``.
        method: 适用的请求方法, 例如 ``"POST"`` 或 ``"GET,POST"``.
        default: dataclass 默认值.
        default_factory: dataclass 默认值工厂.
        **kwargs: 透传给 ``dataclasses.field`` 的其他参数.

    Returns:
        ``dataclasses.field`` 的返回值.

    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[FORM_TAG] = tag
    if method is not None:
        metadata[METHOD_TAG] = method
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata, **kwargs)


@lru_cache(maxsize=None)
def get_record_schema(record_type: type) -> RecordSchema:
    """获取(并缓存) dataclass 类型的绑定描述表.

    Args:
        record_type: dataclass 类型.

    Returns:
        RecordSchema: 按声明顺序排列的字段描述.

    Raises:
        TypeError: 当 ``record_type`` 不是 dataclass 类型时抛出.
        FormBindingError: 类型注解中的前向引用无法解析(UNSUPPORTED_TYPE).

    """
    if not is_record_type(record_type):
        msg = f"{record_type!r} 不是 dataclass 类型"
        raise TypeError(msg)

    try:
        hints = get_type_hints(record_type, include_extras=True)
    except NameError as exc:
        raise FormBindingError(
            FieldErrorKind.UNSUPPORTED_TYPE,
            detail=f"{record_type.__name__} 的类型注解无法解析: {exc}",
        ) from exc
    frozen = bool(record_type.__dataclass_params__.frozen)
    descriptors = []
    for field in dataclasses.fields(record_type):
        type_info = classify(hints.get(field.name, field.type))
        methods = parse_method_restriction(field.metadata.get(METHOD_TAG))
        spec = None
        if type_info.kind not in _RECORD_KINDS:
            spec = parse_field_spec(field.metadata.get(FORM_TAG), field.name, type_info.kind, methods=methods)
        descriptors.append(
            FieldDescriptor(
                attr_name=field.name,
                type_info=type_info,
                methods=methods,
                spec=spec,
                settable=not frozen and not field.name.startswith("_"),
            ),
        )
    return RecordSchema(record_type=record_type, fields=tuple(descriptors), frozen=frozen)


def clear_schema_cache() -> None:
    """清空描述表缓存(测试或热重载后使用)."""
    get_record_schema.cache_clear()


def zero_value(record_type: type) -> Any:
    """按字段默认值构造 dataclass 实例, 未声明默认值的字段取类型零值."""
    schema = get_record_schema(record_type)
    init_fields = {field.name: field for field in dataclasses.fields(record_type) if field.init}
    kwargs: dict[str, Any] = {}
    for descriptor in schema.fields:
        field = init_fields.get(descriptor.attr_name)
        if field is None:
            continue
        if field.default is not MISSING or field.default_factory is not MISSING:
            continue
        kwargs[descriptor.attr_name] = _zero_for(descriptor.type_info)
    return record_type(**kwargs)


def _zero_for(info: TypeInfo) -> Any:
    if info.kind is FieldKind.BOOL:
        return False
    if info.kind is FieldKind.INT:
        return 0
    if info.kind is FieldKind.FLOAT:
        return 0.0
    if info.kind is FieldKind.STRING:
        return ""
    if info.kind is FieldKind.SEQUENCE:
        return () if info.container is tuple else []
    if info.kind is FieldKind.RECORD and info.record_type is not None:
        return zero_value(info.record_type)
    return None


__all__ = [
    "FORM_TAG",
    "METHOD_TAG",
    "FieldDescriptor",
    "RecordSchema",
    "clear_schema_cache",
    "form_field",
    "get_record_schema",
    "zero_value",
]

"""字段类型分类.

把 dataclass 字段的类型注解归一为绑定引擎关心的种类(``FieldKind``):
标量、标量序列、嵌套 dataclass、可选 dataclass、动态类型与不支持的类型.

定宽数值通过 ``typing.Annotated`` 携带位宽标记声明, 例如 ``Int8``、``Uint32``、``Float32``.
裸 ``int`` 不限位宽, 裸 ``float`` 按 64 位处理.
"""

from __future__ import annotations

import dataclasses
import types
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin


class FieldKind(Enum):
    """字段种类."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    RECORD = "record"
    OPTIONAL_RECORD = "optional_record"
    OPTIONAL_SCALAR = "optional_scalar"
    DYNAMIC = "dynamic"
    UNSUPPORTED = "unsupported"

    @property
    def is_scalar(self) -> bool:
        return self in _SCALAR_KINDS


_SCALAR_KINDS = frozenset({FieldKind.BOOL, FieldKind.INT, FieldKind.FLOAT, FieldKind.STRING})


@dataclass(frozen=True, slots=True)
class IntWidth:
    """整数位宽标记."""

    bits: int
    signed: bool = True

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


@dataclass(frozen=True, slots=True)
class FloatWidth:
    """浮点位宽标记, 仅支持 32 与 64."""

    bits: int = 64


Int8 = Annotated[int, IntWidth(8)]
Int16 = Annotated[int, IntWidth(16)]
Int32 = Annotated[int, IntWidth(32)]
Int64 = Annotated[int, IntWidth(64)]
Uint = Annotated[int, IntWidth(64, signed=False)]
Uint8 = Annotated[int, IntWidth(8, signed=False)]
Uint16 = Annotated[int, IntWidth(16, signed=False)]
Uint32 = Annotated[int, IntWidth(32, signed=False)]
Uint64 = Annotated[int, IntWidth(64, signed=False)]
Float32 = Annotated[float, FloatWidth(32)]
Float64 = Annotated[float, FloatWidth(64)]


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """字段类型的归一化描述.

    Attributes:
        kind: 字段种类.
        annotation: 原始类型注解.
        int_width: 整数位宽, 仅 INT 有效, None 表示不限.
        float_width: 浮点位宽, 仅 FLOAT 有效.
        element: 序列元素的类型描述, 仅 SEQUENCE 有效.
        container: 序列容器类型(list 或 tuple), 仅 SEQUENCE 有效.
        record_type: 嵌套 dataclass 类型, 仅 RECORD/OPTIONAL_RECORD 有效.

    """

    kind: FieldKind
    annotation: Any
    int_width: IntWidth | None = None
    float_width: FloatWidth | None = None
    element: TypeInfo | None = None
    container: type | None = None
    record_type: type | None = None


def is_record_type(candidate: object) -> bool:
    """判断对象是否为 dataclass 类型(而非实例)."""
    return isinstance(candidate, type) and dataclasses.is_dataclass(candidate)


def is_record_instance(candidate: object) -> bool:
    """判断对象是否为 dataclass 实例."""
    return dataclasses.is_dataclass(candidate) and not isinstance(candidate, type)


def classify(annotation: Any) -> TypeInfo:
    """归一化字段类型注解.

    Args:
        annotation: 通过 ``typing.get_type_hints(..., include_extras=True)`` 解析后的注解.

    Returns:
        TypeInfo: 字段种类与附加信息.

    """
    base, markers = _unwrap_annotated(annotation)

    if base is Any or base is object:
        return TypeInfo(FieldKind.DYNAMIC, annotation)
    if base is bool:
        return TypeInfo(FieldKind.BOOL, annotation)
    if base is int:
        width = next((m for m in markers if isinstance(m, IntWidth)), None)
        return TypeInfo(FieldKind.INT, annotation, int_width=width)
    if base is float:
        width = next((m for m in markers if isinstance(m, FloatWidth)), FloatWidth(64))
        return TypeInfo(FieldKind.FLOAT, annotation, float_width=width)
    if base is str:
        return TypeInfo(FieldKind.STRING, annotation)
    if is_record_type(base):
        return TypeInfo(FieldKind.RECORD, annotation, record_type=base)

    origin = get_origin(base)
    if origin is Union or origin is types.UnionType:
        return _classify_union(annotation, base)
    if origin in (list, tuple):
        return _classify_sequence(annotation, base, origin)
    return TypeInfo(FieldKind.UNSUPPORTED, annotation)


def _unwrap_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    if get_origin(annotation) is Annotated:
        base, *markers = get_args(annotation)
        return base, tuple(markers)
    return annotation, ()


def _classify_union(annotation: Any, base: Any) -> TypeInfo:
    members = [arg for arg in get_args(base) if arg is not type(None)]
    if len(members) != len(get_args(base)) - 1 or len(members) != 1:
        # 非 Optional 的联合类型视同动态类型
        return TypeInfo(FieldKind.DYNAMIC, annotation)
    inner = classify(members[0])
    if inner.kind is FieldKind.RECORD:
        return TypeInfo(FieldKind.OPTIONAL_RECORD, annotation, record_type=inner.record_type)
    if inner.kind.is_scalar:
        return TypeInfo(FieldKind.OPTIONAL_SCALAR, annotation, element=inner)
    return TypeInfo(FieldKind.UNSUPPORTED, annotation)


def _classify_sequence(annotation: Any, base: Any, origin: type) -> TypeInfo:
    args = get_args(base)
    if origin is list:
        if len(args) != 1:
            return TypeInfo(FieldKind.UNSUPPORTED, annotation)
        element_annotation = args[0]
    else:
        # 仅支持变长 tuple[T, ...]
        if len(args) != 2 or args[1] is not Ellipsis:
            return TypeInfo(FieldKind.UNSUPPORTED, annotation)
        element_annotation = args[0]
    element = classify(element_annotation)
    return TypeInfo(FieldKind.SEQUENCE, annotation, element=element, container=origin)


__all__ = [
    "FieldKind",
    "Float32",
    "Float64",
    "FloatWidth",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntWidth",
    "TypeInfo",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "classify",
    "is_record_instance",
    "is_record_type",
]

"""表单值类型转换.

把一个或多个原始字符串转换为字段声明的标量类型或标量序列.

规则:
- bool: 仅 ``"1"`` 与 ``"on"`` 为 True, 其余(包括空串)为 False.
- int/float: 空串按 ``"0"`` 处理; 只接受十进制字面量, 越出位宽视为解析失败.
- str: 原样返回.
- 序列: 逐个元素转换, 任一元素失败则整个字段失败, 不产生部分结果.
- 可选标量、动态类型与其他类型一律报 UNSUPPORTED_TYPE.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Sequence

from formbind.binding.kinds import FieldKind, TypeInfo
from formbind.errors import FieldErrorKind, FormBindingError

_TRUE_LITERALS = frozenset({"1", "on"})
_SIGNED_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_PATTERN = re.compile(r"\+?[0-9]+")
_DECIMAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def coerce_field(field_name: str, info: TypeInfo, raw_values: Sequence[str]) -> object:
    """转换字段的全部原始值.

    Args:
        field_name: dataclass 字段名, 用于错误信息.
        info: 字段类型描述.
        raw_values: 至少包含一个元素的原始值序列.

    Returns:
        转换后的字段值.

    Raises:
        FormBindingError: 解析失败(VALUE_PARSING_ERROR)或类型不支持(UNSUPPORTED_TYPE).

    """
    if info.kind is FieldKind.SEQUENCE:
        element = info.element
        if element is None or not element.kind.is_scalar:
            raise _unsupported(field_name, info)
        items = [coerce_scalar(field_name, element, raw) for raw in raw_values]
        return tuple(items) if info.container is tuple else items
    if info.kind is FieldKind.BOOL:
        # 多值提交的复选框不视为勾选
        return len(raw_values) == 1 and raw_values[0] in _TRUE_LITERALS
    if info.kind.is_scalar:
        return coerce_scalar(field_name, info, raw_values[0])
    raise _unsupported(field_name, info)


def coerce_scalar(field_name: str, info: TypeInfo, raw: str) -> object:
    """转换单个原始值为标量."""
    if info.kind is FieldKind.BOOL:
        return raw in _TRUE_LITERALS
    if info.kind is FieldKind.STRING:
        return raw
    if info.kind is FieldKind.INT:
        return _parse_int(field_name, info, raw or "0")
    if info.kind is FieldKind.FLOAT:
        return _parse_float(field_name, info, raw or "0")
    raise _unsupported(field_name, info)


def _parse_int(field_name: str, info: TypeInfo, raw: str) -> int:
    width = info.int_width
    pattern = _UNSIGNED_INT_PATTERN if width is not None and not width.signed else _SIGNED_INT_PATTERN
    if not pattern.fullmatch(raw):
        raise _parsing_error(field_name, raw, "不是合法的十进制整数")
    value = int(raw, 10)
    if width is not None and not width.min_value <= value <= width.max_value:
        raise _parsing_error(
            field_name,
            raw,
            f"超出 {'' if width.signed else 'u'}int{width.bits} 取值范围",
        )
    return value


def _parse_float(field_name: str, info: TypeInfo, raw: str) -> float:
    if _SPECIAL_FLOAT_PATTERN.fullmatch(raw):
        return float(raw)
    if not _DECIMAL_FLOAT_PATTERN.fullmatch(raw):
        raise _parsing_error(field_name, raw, "不是合法的十进制数")
    value = float(raw)
    bits = info.float_width.bits if info.float_width is not None else 64
    if math.isinf(value):
        raise _parsing_error(field_name, raw, f"超出 float{bits} 取值范围")
    if bits == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            raise _parsing_error(field_name, raw, "超出 float32 取值范围") from None
        # pack 可能直接得到 inf 而不抛 OverflowError
        if math.isinf(value):
            raise _parsing_error(field_name, raw, "超出 float32 取值范围")
    return value


def _parsing_error(field_name: str, raw: str, reason: str) -> FormBindingError:
    return FormBindingError(
        FieldErrorKind.VALUE_PARSING_ERROR,
        field=field_name,
        value=raw,
        detail=f"{raw!r} {reason}",
    )


def _unsupported(field_name: str, info: TypeInfo) -> FormBindingError:
    return FormBindingError(
        FieldErrorKind.UNSUPPORTED_TYPE,
        field=field_name,
        detail=f"不支持的字段类型 {info.annotation!r}",
    )


__all__ = ["coerce_field", "coerce_scalar"]

"""字段类型分类的单元测试."""

from dataclasses import dataclass
from typing import Any, Optional

import pytest

from formbind.binding.kinds import FieldKind, Int16, IntWidth, Uint32, classify


@dataclass
class Address:
    city: str = ""


@pytest.mark.unit
def test_classify_scalars() -> None:
    assert classify(bool).kind is FieldKind.BOOL
    assert classify(int).kind is FieldKind.INT
    assert classify(int).int_width is None
    assert classify(float).kind is FieldKind.FLOAT
    assert classify(float).float_width.bits == 64
    assert classify(str).kind is FieldKind.STRING


@pytest.mark.unit
def test_classify_fixed_width_aliases() -> None:
    assert classify(Int16).int_width == IntWidth(16)
    assert classify(Uint32).int_width == IntWidth(32, signed=False)
    assert IntWidth(16).min_value == -32768
    assert IntWidth(32, signed=False).max_value == 4294967295


@pytest.mark.unit
def test_classify_records_and_optionals() -> None:
    record = classify(Address)
    assert record.kind is FieldKind.RECORD
    assert record.record_type is Address

    for annotation in (Address | None, Optional[Address]):
        optional = classify(annotation)
        assert optional.kind is FieldKind.OPTIONAL_RECORD
        assert optional.record_type is Address

    assert classify(int | None).kind is FieldKind.OPTIONAL_SCALAR


@pytest.mark.unit
def test_classify_sequences() -> None:
    info = classify(list[Int16])
    assert info.kind is FieldKind.SEQUENCE
    assert info.container is list
    assert info.element.int_width == IntWidth(16)

    assert classify(tuple[str, ...]).container is tuple
    assert classify(tuple[str, int]).kind is FieldKind.UNSUPPORTED


@pytest.mark.unit
def test_classify_dynamic_and_unsupported() -> None:
    assert classify(Any).kind is FieldKind.DYNAMIC
    assert classify(object).kind is FieldKind.DYNAMIC
    assert classify(int | str).kind is FieldKind.DYNAMIC
    assert classify(dict[str, int]).kind is FieldKind.UNSUPPORTED
    assert classify(set[int]).kind is FieldKind.UNSUPPORTED

"""dataclass 绑定描述表的单元测试."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from werkzeug.datastructures import MultiDict

from formbind.binding.entrypoints import bind_values
from formbind.binding.kinds import FieldKind, Int8
from formbind.binding.schema import form_field, get_record_schema, zero_value
from formbind.errors import FieldErrorKind, FormBindingError


@dataclass
class Inner:
    a: str = form_field("a,required", default="")


@dataclass
class Outer:
    name: str = form_field("name,notempty", method="post,PUT")
    count: Int8 = form_field("count,default=3")
    tags: list[str] = form_field("tags", default_factory=list)
    inner: Inner = field(default_factory=Inner)
    maybe: Inner | None = None
    _hidden: str = form_field("hidden", default="")


@dataclass(frozen=True)
class FrozenForm:
    q: str = form_field("q", default="")


@dataclass
class NoDefaults:
    flag: bool
    number: int
    ratio: float
    text: str
    items: list[int]
    frozen_items: tuple[str, ...]
    inner: Inner
    maybe: Inner | None
    anything: Any


@pytest.mark.unit
def test_form_field_stores_tag_and_method_metadata() -> None:
    declared = form_field("username,required", method="POST", default="")
    assert declared.metadata["form"] == "username,required"
    assert declared.metadata["method"] == "POST"
    assert declared.default == ""


@pytest.mark.unit
def test_get_record_schema_keeps_declaration_order_and_specs() -> None:
    schema = get_record_schema(Outer)

    assert [d.attr_name for d in schema.fields] == ["name", "count", "tags", "inner", "maybe", "_hidden"]
    name, count, tags, inner, maybe, hidden = schema.fields
    assert name.methods == frozenset({"POST", "PUT"})
    assert name.spec.not_empty is True
    assert count.type_info.int_width.bits == 8
    assert count.spec.default_literal == "3"
    assert tags.kind is FieldKind.SEQUENCE
    assert inner.is_record and inner.spec is None
    assert maybe.kind is FieldKind.OPTIONAL_RECORD
    assert hidden.settable is False
    assert name.settable is True


@pytest.mark.unit
def test_get_record_schema_is_cached_per_type() -> None:
    assert get_record_schema(Outer) is get_record_schema(Outer)


@pytest.mark.unit
def test_get_record_schema_marks_frozen_records_unsettable() -> None:
    schema = get_record_schema(FrozenForm)
    assert schema.frozen is True
    assert all(not d.settable for d in schema.fields)


@pytest.mark.unit
def test_get_record_schema_rejects_non_dataclass() -> None:
    with pytest.raises(TypeError):
        get_record_schema(int)


@dataclass
class DanglingRef:
    title: str = form_field("title", default="")
    owner: "UndeclaredOwner | None" = None  # noqa: F821


@pytest.mark.unit
def test_get_record_schema_reports_unresolved_forward_reference() -> None:
    with pytest.raises(FormBindingError) as exc_info:
        get_record_schema(DanglingRef)

    assert exc_info.value.kind is FieldErrorKind.UNSUPPORTED_TYPE
    assert "DanglingRef" in exc_info.value.message
    assert exc_info.value.status_code == 500


@pytest.mark.unit
def test_bind_unresolved_forward_reference_is_binding_error() -> None:
    with pytest.raises(FormBindingError) as exc_info:
        bind_values(MultiDict([("title", "x")]), DanglingRef(), "POST")

    assert exc_info.value.kind is FieldErrorKind.UNSUPPORTED_TYPE


@pytest.mark.unit
def test_zero_value_fills_missing_defaults_by_kind() -> None:
    value = zero_value(NoDefaults)

    assert value.flag is False
    assert value.number == 0
    assert value.ratio == 0.0
    assert value.text == ""
    assert value.items == []
    assert value.frozen_items == ()
    assert value.inner == Inner(a="")
    assert value.maybe is None
    assert value.anything is None


@pytest.mark.unit
def test_zero_value_respects_declared_defaults() -> None:
    value = zero_value(Outer)
    assert value.count == 0
    assert value.tags == []
    assert value.inner == Inner()
    assert value.maybe is None

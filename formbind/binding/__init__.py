"""表单绑定引擎.

把 HTTP 表单的多值键值对绑定到声明式 dataclass, 支持嵌套/组合 dataclass、
按请求方法过滤字段、required/notempty/default 选项与标量/序列类型转换.
"""

from formbind.binding.entrypoints import allocate_and_bind, bind_into, bind_values
from formbind.binding.field_spec import FieldSpec, parse_field_spec
from formbind.binding.form_source import FormValueSource, MultiDictFormSource, RequestFormSource
from formbind.binding.kinds import (
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
)
from formbind.binding.schema import clear_schema_cache, form_field, get_record_schema, zero_value

__all__ = [
    "FieldSpec",
    "Float32",
    "Float64",
    "FormValueSource",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "MultiDictFormSource",
    "RequestFormSource",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "allocate_and_bind",
    "bind_into",
    "bind_values",
    "clear_schema_cache",
    "form_field",
    "get_record_schema",
    "parse_field_spec",
    "zero_value",
]

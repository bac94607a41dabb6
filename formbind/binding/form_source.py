"""表单值来源.

绑定器只通过 ``FormValueSource`` 协议读取表单值, 解析 query/body、multipart 与内存上限
全部交给 werkzeug.

读取策略:
- POST/PUT/PATCH(可配置)只读取 body 表单 ``request.form``.
- 其他方法读取 ``request.values``(query 与 body 合并).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from formbind.constants import HttpMethod

if TYPE_CHECKING:
    from werkzeug.datastructures import MultiDict
    from werkzeug.wrappers import Request


class FormValueSource(Protocol):
    """绑定器使用的最小表单值协议."""

    @property
    def method(self) -> str:
        """协议属性: 大写的请求方法."""
        ...

    def lookup(self, name: str) -> tuple[list[str], bool]:
        """协议方法: 返回字段的全部值与是否出现(区分缺失与空值)."""
        ...


class MultiDictFormSource:
    """基于已解析 MultiDict 的表单值来源."""

    def __init__(self, values: MultiDict[str, str], method: str) -> None:
        self._values = values
        self._method = method.upper()

    @property
    def method(self) -> str:
        return self._method

    def lookup(self, name: str) -> tuple[list[str], bool]:
        if name not in self._values:
            return [], False
        return list(self._values.getlist(name)), True


class RequestFormSource:
    """基于 werkzeug/Flask 请求对象的表单值来源.

    Attributes:
        request: 当前请求.
        mutating_methods: 只读取 body 表单的请求方法集合.

    """

    def __init__(
        self,
        request: Request,
        *,
        mutating_methods: Iterable[str] = HttpMethod.BODY_FORM_METHODS,
    ) -> None:
        self.request = request
        self.mutating_methods = frozenset(item.upper() for item in mutating_methods)
        self._method = (request.method or "").upper()

    @property
    def method(self) -> str:
        return self._method

    def ensure_parsed(self) -> None:
        """触发 query 与 body 的解析, 解析异常(如 RequestEntityTooLarge)原样抛出."""
        _ = self.request.args
        _ = self.request.form

    def _values(self) -> MultiDict[str, str]:
        if self._method in self.mutating_methods:
            return self.request.form
        return self.request.values

    def lookup(self, name: str) -> tuple[list[str], bool]:
        values = self._values()
        if name not in values:
            return [], False
        return list(values.getlist(name)), True


__all__ = ["FormValueSource", "MultiDictFormSource", "RequestFormSource"]

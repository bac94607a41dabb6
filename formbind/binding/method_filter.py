"""按请求方法过滤字段.

字段可通过 ``method`` 元数据声明适用的 HTTP 方法(逗号分隔, 大小写不敏感).
未声明时对所有方法生效; 方法不匹配的字段既不读取也不校验, 保持零值.
"""

from __future__ import annotations

MethodRestriction = frozenset[str]


def parse_method_restriction(raw: str | None) -> MethodRestriction | None:
    """解析方法限制声明.

    Args:
        raw: ``method`` 元数据原文, None 表示未声明.

    Returns:
        大写方法名集合; 未声明时返回 None.

    """
    if raw is None:
        return None
    return frozenset(item.strip() for item in raw.upper().split(",") if item.strip())


def is_method_eligible(restriction: MethodRestriction | None, method: str) -> bool:
    """判断字段在当前请求方法下是否参与绑定."""
    if restriction is None:
        return True
    return method.upper() in restriction


__all__ = ["MethodRestriction", "is_method_eligible", "parse_method_restriction"]

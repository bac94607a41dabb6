"""结构化日志处理器:按配置丢弃 DEBUG 事件."""

from __future__ import annotations

from typing import Any

import structlog


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        """初始化 DEBUG 过滤器.

        Args:
            enabled: 是否启用 DEBUG 日志,默认为 False.

        """
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """处理日志事件,根据配置决定是否丢弃 DEBUG 日志.

        Args:
            logger: structlog 绑定的日志记录器.
            method_name: 日志方法名称.
            event_dict: 日志事件字典.

        Returns:
            处理后的事件字典.

        Raises:
            structlog.DropEvent: 当 DEBUG 日志未启用时抛出,丢弃该日志.

        """
        # 过滤器位于处理链首位, 此时 level 字段尚未写入, 以方法名判断
        if method_name == "debug" and not self.enabled:
            raise structlog.DropEvent
        return event_dict

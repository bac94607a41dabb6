"""formbind 的结构化日志配置与辅助函数."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, cast

import structlog
from flask import Flask, current_app, has_request_context, request

from formbind.settings import APP_NAME, APP_VERSION
from formbind.utils.logging.handlers import DebugFilter

if TYPE_CHECKING:
    from structlog.typing import Processor

StructlogEventDict = dict[str, Any]


class StructlogConfig:
    """structlog 配置核心类.

    负责配置处理器链与调试日志过滤.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 是否已配置标志.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure(app)
        >>> logger = get_logger('my_module')

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False

    def configure(self, app: Flask | None = None) -> None:
        """初始化 structlog 处理器(幂等).

        Args:
            app: Flask 应用实例,可选.如果提供,将读取 ``FORMBIND_ENABLE_DEBUG_LOG`` 配置.

        """
        if not self.configured:
            processors = [
                self.debug_filter,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                self._add_request_context,
                self._add_global_context,
                self._get_console_renderer(),
            ]
            structlog.configure(
                processors=cast("list[Processor]", processors),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if app is not None:
            enable_debug = bool(app.config.get("FORMBIND_ENABLE_DEBUG_LOG", False))
            self.debug_filter.set_enabled(enabled=enable_debug)

    @staticmethod
    def _add_request_context(
        _logger: Any,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """向事件字典写入请求方法与路径."""
        if has_request_context():
            event_dict["http_method"] = request.method
            event_dict["path"] = request.path
        return event_dict

    @staticmethod
    def _add_global_context(
        _logger: Any,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """附加应用名称与版本."""
        try:
            event_dict["app_name"] = current_app.name
        except RuntimeError:
            event_dict["app_name"] = APP_NAME
        event_dict["app_version"] = APP_VERSION
        return event_dict

    @staticmethod
    def _get_console_renderer() -> Processor:
        """根据终端能力返回渲染器.

        Returns:
            structlog renderer,用于控制台输出.

        """
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器.

    不会修改 structlog 全局配置, 处理器链只在 ``configure_structlog`` 中安装.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定的 structlog 日志记录器实例.

    Example:
        >>> logger = get_logger('form_binding')
        >>> logger.info('绑定完成', record='LoginForm')

    """
    return structlog.get_logger(name)


def configure_structlog(app: Flask) -> None:
    """配置 structlog 并按应用配置开启调试日志.

    Args:
        app: Flask 应用实例.

    """
    structlog_config.configure(app)


__all__ = ["StructlogConfig", "configure_structlog", "get_logger", "structlog_config"]

"""结构化日志配置与辅助函数."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, cast

import structlog

from params_sanitizer.settings import get_settings

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

    from params_sanitizer.types import JsonValue, StructlogEventDict


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(
        self,
        _logger: BindableLogger,
        method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """处理日志事件,未启用时丢弃 DEBUG 日志.

        Raises:
            structlog.DropEvent: 当 DEBUG 日志未启用时抛出.

        """
        level = str(event_dict.get("level", method_name)).upper()
        if level == "DEBUG" and not self.enabled:
            raise structlog.DropEvent
        return event_dict


class StructlogConfig:
    """structlog 配置核心类.

    负责组装处理器链并配置 structlog,可以多次调用,只会配置一次.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 是否已配置标志.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure()
        >>> logger = get_logger('sanitizer')

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False

    def configure(self) -> None:
        """初始化 structlog 处理器(幂等)."""
        if self.configured:
            return

        settings = get_settings()
        self.debug_filter.set_enabled(enabled=settings.enable_debug_log)
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.log_level)

        processors = [
            structlog.stdlib.add_log_level,
            self.debug_filter,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            self._add_global_context,
            self._get_renderer(json_output=settings.log_json),
        ]
        structlog.configure(
            processors=cast("list[Processor]", processors),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self.configured = True

    @staticmethod
    def _add_global_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """附加应用名称、版本与 logger 名称."""
        settings = get_settings()
        event_dict["app_name"] = settings.app_name
        event_dict["app_version"] = settings.app_version
        event_dict["logger_name"] = getattr(_logger, "name", "unknown")
        return event_dict

    @staticmethod
    def _get_renderer(*, json_output: bool) -> Processor:
        """根据配置与终端能力返回渲染器."""
        if json_output:
            return structlog.processors.JSONRenderer(ensure_ascii=False)
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定的 structlog 日志记录器实例.

    Example:
        >>> logger = get_logger('sanitizer')
        >>> logger.info('校验完成', status=True)

    """
    structlog_config.configure()
    return structlog.get_logger(name)


def should_log_debug() -> bool:
    """检查是否应该记录调试日志."""
    return get_settings().enable_debug_log


def log_warning(
    message: str,
    module: str = "app",
    exception: Exception | None = None,
    **kwargs: JsonValue,
) -> None:
    """记录警告级别日志,可附带异常文本."""
    logger = get_logger("app")
    if exception:
        logger.warning(message, module=module, exception=str(exception), **kwargs)
    else:
        logger.warning(message, module=module, **kwargs)


def log_debug(message: str, module: str = "app", **kwargs: JsonValue) -> None:
    """记录调试级别日志."""
    if not should_log_debug():
        return
    get_logger("app").debug(message, module=module, **kwargs)


def get_sanitizer_logger() -> structlog.stdlib.BoundLogger:
    """返回参数校验模块的 logger."""
    return get_logger("sanitizer")

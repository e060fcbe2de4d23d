"""Flask 路由装饰器."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from flask import g, request

from params_sanitizer.constants import ErrorMessages
from params_sanitizer.errors import ValidationError
from params_sanitizer.utils.request_inputs import inputs_from_flask_request
from params_sanitizer.utils.structlog_config import log_warning

if TYPE_CHECKING:
    from collections.abc import Callable

    from params_sanitizer.services.sanitizer import ParamsSanitizer

P = ParamSpec("P")
R = TypeVar("R")


def validate_params(sanitizer: ParamsSanitizer) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """校验当前请求参数的装饰器.

    校验通过后把转换结果写入 ``flask.g.params``,视图函数直接读取即可.

    Args:
        sanitizer: 路由对应的参数定义.

    Returns:
        装饰器.

    Raises:
        ValidationError: 参数校验未通过,``extra`` 中携带完整的校验报告.
        PayloadParseError: object 参数无法解析为对象.

    Example:
        >>> @app.get("/users/<user_id>")
        ... @validate_params(ParamsSanitizer([{"name": "user_id", "in": "path", "type": "number"}]))
        ... def get_user(user_id):
        ...     return {"id": g.params.path["user_id"]}

    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            inputs = inputs_from_flask_request()
            report = sanitizer.check(inputs)
            if not report.status:
                payload = report.to_dict()
                log_warning(
                    "请求参数被拒绝",
                    module="decorators",
                    request_path=request.path,
                    request_method=request.method,
                    report=payload,
                )
                raise ValidationError(
                    ErrorMessages.PARAMS_CHECK_FAILED,
                    message_key="PARAMS_CHECK_FAILED",
                    extra=payload,
                )

            g.params = sanitizer.values(inputs)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["validate_params"]

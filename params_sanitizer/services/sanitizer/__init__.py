"""参数校验与转换服务."""

from .coercer import coerce_params, coerce_value
from .params_sanitizer import ParamsSanitizer
from .validator import check_params

__all__ = ["ParamsSanitizer", "check_params", "coerce_params", "coerce_value"]

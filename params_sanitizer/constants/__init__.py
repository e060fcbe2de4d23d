"""常量模块.

主要常量:
- FieldType / Location: 参数字段类型与来源位置
- FieldDefaults: 参数定义的默认值
- BooleanTokens: 布尔值的规范表示
- ErrorMessages / ErrorCategory / ErrorSeverity: 错误相关常量
"""

from http import HTTPStatus as HttpStatus

from .field_types import LOCATIONS, BooleanTokens, FieldDefaults, FieldType, Location
from .system_constants import ErrorCategory, ErrorMessages, ErrorSeverity, LogLevel

__all__ = [
    "LOCATIONS",
    "BooleanTokens",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FieldDefaults",
    "FieldType",
    "HttpStatus",
    "Location",
    "LogLevel",
]

"""系统常量.

定义日志级别、错误分类、错误严重度与错误消息,避免魔法字符串.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    SCHEMA = "schema"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"

    # 参数校验
    PARAMS_CHECK_FAILED = "请求参数校验失败"
    PAYLOAD_PARSE_ERROR = "参数无法解析为结构化数据: {field}"
    SCHEMA_DEFINITION_ERROR = "参数定义无效"
    UNSUPPORTED_FIELD_TYPE = "不支持的参数类型: {value}"
    UNSUPPORTED_LOCATION = "不支持的参数位置: {value}"
    OBJECT_ARRAY_UNSUPPORTED = "object 类型参数不支持 isArray: {field}"

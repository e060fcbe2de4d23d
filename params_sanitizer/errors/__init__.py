"""统一异常定义.

说明:
- 缺失/未知/格式错误等参数问题不会抛出异常,而是收集到 CheckResult 中由调用方决定如何响应.
- 只有参数定义本身无效、或转换时遇到无法解析的结构化数据时才抛出异常.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from params_sanitizer.constants import ErrorCategory, ErrorMessages, ErrorSeverity, HttpStatus

if TYPE_CHECKING:
    from params_sanitizer.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str

    @property
    def default_message(self) -> str:
        """根据 message key 获取默认文案."""
        return getattr(ErrorMessages, self.default_message_key, ErrorMessages.INTERNAL_ERROR)


class AppError(Exception):
    """统一的基础异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: 覆盖默认 message_key 的可选值.
        extra: 结构化日志附加字段.
        severity: 错误严重度.
        category: 错误分类.
        status_code: 覆盖默认 HTTP 状态码.

    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
    ) -> None:
        """初始化基础异常."""
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self.severity = severity or self.metadata.severity
        self.category = category or self.metadata.category
        self.status_code = status_code or self.metadata.status_code
        super().__init__(self.message)

    @property
    def recoverable(self) -> bool:
        """表示该异常是否可恢复.

        Returns:
            bool: 严重度为 LOW 或 MEDIUM 时为 True.

        """
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """表示请求参数未通过校验.

    由 Flask 适配层在 check 失败时抛出,``extra`` 中携带完整的校验报告,默认返回 400.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class PayloadParseError(ValidationError):
    """表示 object 类型参数的值无法解析为结构化数据.

    仅在转换阶段抛出;校验阶段会把同样的问题记录为 malformed.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="PAYLOAD_PARSE_ERROR",
    )

    def __init__(self, field: str, *, extra: LoggerExtra | None = None) -> None:
        """构造错误并记录出错字段的限定名."""
        self.field = field
        super().__init__(
            ErrorMessages.PAYLOAD_PARSE_ERROR.format(field=field),
            extra={"field": field, **dict(extra or {})},
        )


class SchemaDefinitionError(AppError):
    """表示参数定义无效(未知类型、未知位置或 object 数组)."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SCHEMA,
        severity=ErrorSeverity.HIGH,
        default_message_key="SCHEMA_DEFINITION_ERROR",
    )


__all__ = [
    "AppError",
    "ExceptionMetadata",
    "PayloadParseError",
    "SchemaDefinitionError",
    "ValidationError",
]

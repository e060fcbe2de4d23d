"""参数校验与转换入口."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from params_sanitizer.schemas.field_definition import FieldDefinition, normalize_definitions
from params_sanitizer.schemas.reports import CheckResult, ValueResult
from params_sanitizer.services.sanitizer.coercer import coerce_params
from params_sanitizer.services.sanitizer.validator import check_params
from params_sanitizer.settings import get_settings
from params_sanitizer.utils.request_inputs import RequestInputs
from params_sanitizer.utils.structlog_config import get_sanitizer_logger, log_debug


class ParamsSanitizer:
    """按声明式字段定义校验并转换请求参数.

    字段定义在构造时归一化一次,之后不可变,可在多个线程/请求之间共享.
    ``check`` 与 ``values`` 互不依赖,调用顺序由调用方决定.

    Attributes:
        definitions: 归一化后的顶层字段定义.
        strict: 是否把未定义的字段记为 unknown.

    Example:
        >>> sanitizer = ParamsSanitizer([{"name": "page", "type": "number", "default": 1}])
        >>> sanitizer.values(RequestInputs.from_mappings(query={"page": "3"})).query
        {'page': 3}

    """

    def __init__(
        self,
        definitions: Iterable[Mapping[str, Any] | FieldDefinition],
        *,
        strict: bool | None = None,
    ) -> None:
        """归一化字段定义.

        Args:
            definitions: 调用方编写的字段定义,不会被修改.
            strict: 是否启用严格模式,缺省时读取配置 ``PARAMS_SANITIZER_STRICT``.

        Raises:
            SchemaDefinitionError: 字段定义无效.

        """
        self.definitions: tuple[FieldDefinition, ...] = normalize_definitions(definitions)
        self.strict = get_settings().strict if strict is None else strict
        log_debug(
            "参数定义已归一化",
            module="sanitizer",
            field_count=len(self.definitions),
            strict=self.strict,
        )

    def check(self, inputs: RequestInputs | None = None) -> CheckResult:
        """校验请求参数,返回缺失/未知/格式错误报告.

        参数问题不会抛出异常,由调用方根据 ``CheckResult.status`` 决定如何响应.
        """
        result = check_params(self.definitions, inputs or RequestInputs(), strict=self.strict)
        if not result.status:
            get_sanitizer_logger().info(
                "请求参数校验未通过",
                module="sanitizer",
                missing=result.missing.count(),
                unknown=result.unknown.count(),
                malformed=result.malformed.count(),
            )
        return result

    def values(self, inputs: RequestInputs | None = None) -> ValueResult:
        """提取并转换请求参数,未传值的字段使用 default.

        Raises:
            PayloadParseError: object 字段的值无法解析为对象.

        """
        return coerce_params(self.definitions, inputs or RequestInputs())

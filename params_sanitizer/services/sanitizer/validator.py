"""参数校验.

按 query/path/body 三个位置逐一检查:
1. 缺失: 必填字段不在输入中(或值为 None).
2. 未知: 输入中出现但没有对应定义的 key,仅严格模式记录.
3. 格式错误: 值不符合声明类型; 已记为缺失的字段不会再记为格式错误.

object 字段声明了 properties 时,会以 ``父字段名.`` 为前缀递归校验嵌套值,
嵌套结果按位置拼接到当前报告.整个过程是纯函数,不做 I/O,也不修改输入.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from params_sanitizer.constants import LOCATIONS, FieldType, Location
from params_sanitizer.schemas.field_definition import ObjectField
from params_sanitizer.schemas.reports import CheckResult
from params_sanitizer.utils.value_parsers import (
    is_canonical_boolean,
    is_date,
    is_number,
    load_mapping,
    split_elements,
)

if TYPE_CHECKING:
    from params_sanitizer.schemas.field_definition import FieldDefinition
    from params_sanitizer.types.structures import PayloadMapping, PayloadValue
    from params_sanitizer.utils.request_inputs import RequestInputs

_SCALAR_RULES: dict[FieldType, Callable[[PayloadValue], bool]] = {
    FieldType.NUMBER: is_number,
    FieldType.DATE: is_date,
    FieldType.BOOLEAN: is_canonical_boolean,
}


def check_params(
    definitions: Sequence[FieldDefinition],
    inputs: RequestInputs,
    *,
    strict: bool = False,
    path_prefix: str = "",
) -> CheckResult:
    """校验三份输入,返回按位置分组的报告.

    Args:
        definitions: 已归一化的顶层字段定义.
        inputs: query/path/body 三份输入.
        strict: 是否记录未定义的字段.
        path_prefix: 字段名前缀,用于嵌套字段的限定名.

    Returns:
        CheckResult: 新建的校验报告,``status`` 为 True 表示全部通过.

    """
    result = CheckResult()
    for location in LOCATIONS:
        scoped = [definition for definition in definitions if definition.location == location]
        result.merge(
            _check_scope(
                scoped,
                inputs.for_location(location),
                location=location,
                strict=strict,
                prefix=path_prefix,
            ),
        )
    return result


def _check_scope(
    definitions: Sequence[FieldDefinition],
    params: PayloadMapping,
    *,
    location: Location,
    strict: bool,
    prefix: str,
) -> CheckResult:
    """校验单个位置(或单个嵌套对象)内的所有字段."""
    result = CheckResult()
    by_name = {definition.name: definition for definition in reversed(definitions)}

    for definition in definitions:
        if definition.required and params.get(definition.name) is None:
            result.missing.add(location, definition.qualified_name(prefix))

    for name, value in params.items():
        qualified = f"{prefix}{name}"
        definition = by_name.get(name)
        if definition is None:
            if strict:
                result.unknown.add(location, qualified)
            continue

        if result.missing.contains(location, qualified) or value is None:
            continue

        if _is_malformed(definition, value):
            result.malformed.add(location, qualified)
            continue

        if isinstance(definition, ObjectField):
            try:
                nested = load_mapping(value)
            except ValueError:
                result.malformed.add(location, qualified)
                continue
            if not definition.properties:
                continue
            result.merge(
                _check_scope(
                    definition.properties,
                    nested,
                    location=location,
                    strict=strict,
                    prefix=f"{qualified}.",
                ),
            )

    return result


def _is_malformed(definition: FieldDefinition, value: PayloadValue) -> bool:
    """按声明类型检查值是否格式错误; string/object 在这一层不检查."""
    rule = _SCALAR_RULES.get(definition.field_type)
    if rule is None:
        return False
    if getattr(definition, "is_array", False):
        return not all(rule(token) for token in split_elements(value, definition.elements_divider))
    return not rule(value)


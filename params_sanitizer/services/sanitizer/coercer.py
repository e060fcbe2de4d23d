"""参数转换.

按字段定义从对应位置取值并转换为声明类型,未传值时使用字段的 default(原样返回,不做转换).
转换不依赖校验结果: 值不合法时数字得到 NaN、布尔得到 False、日期得到 None,
只有 object 字段的值无法解析为对象时才抛出 PayloadParseError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from params_sanitizer.constants import FieldType
from params_sanitizer.errors import PayloadParseError
from params_sanitizer.schemas.field_definition import ObjectField
from params_sanitizer.schemas.reports import ValueResult
from params_sanitizer.utils.value_parsers import load_mapping, parse_date, split_elements, to_boolean, to_number

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from params_sanitizer.schemas.field_definition import FieldDefinition
    from params_sanitizer.types.structures import PayloadValue
    from params_sanitizer.utils.request_inputs import RequestInputs


def _keep(value: PayloadValue) -> PayloadValue:
    return value


_SCALAR_CONVERTERS: dict[FieldType, Callable[[PayloadValue], Any]] = {
    FieldType.STRING: _keep,
    FieldType.NUMBER: to_number,
    FieldType.BOOLEAN: to_boolean,
    FieldType.DATE: parse_date,
}


def coerce_params(definitions: Sequence[FieldDefinition], inputs: RequestInputs) -> ValueResult:
    """按字段定义转换三份输入.

    Args:
        definitions: 已归一化的顶层字段定义.
        inputs: query/path/body 三份输入.

    Returns:
        ValueResult: 新建的转换结果; 未传值且 default 为 None 的字段不会出现在结果中.

    Raises:
        PayloadParseError: object 字段的值不是合法的 JSON 对象.

    """
    result = ValueResult()
    for definition in definitions:
        raw = inputs.for_location(definition.location).get(definition.name)
        value = coerce_value(raw, definition)
        if value is not None:
            result.for_location(definition.location)[definition.name] = value
    return result


def coerce_value(value: PayloadValue, definition: FieldDefinition, *, prefix: str = "") -> Any:
    """转换单个字段的值; 值为 None 时返回 default."""
    if value is None:
        return definition.default

    if isinstance(definition, ObjectField):
        return _coerce_object(value, definition, prefix=prefix)

    convert = _SCALAR_CONVERTERS[definition.field_type]
    if definition.is_array:
        return [convert(token) for token in split_elements(value, definition.elements_divider)]
    return convert(value)


def _coerce_object(value: PayloadValue, definition: ObjectField, *, prefix: str) -> dict[str, Any]:
    qualified = definition.qualified_name(prefix)
    try:
        parsed: dict[str, Any] = load_mapping(value)
    except ValueError as exc:
        raise PayloadParseError(qualified, extra={"reason": str(exc)}) from exc

    for nested in definition.properties:
        coerced = coerce_value(parsed.get(nested.name), nested, prefix=f"{qualified}.")
        if coerced is not None:
            parsed[nested.name] = coerced
    return parsed

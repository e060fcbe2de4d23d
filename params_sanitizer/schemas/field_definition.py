"""参数字段定义与默认值合并.

约定:
- 字段定义按 ``type`` 区分为五个变体,每个变体只携带与自身相关的属性:
  标量变体(string/number/boolean/date)携带 ``is_array``/``elements_divider``,
  只有 object 变体携带 ``properties``.
- 不属于当前变体的属性(例如 number 字段上的 properties)会被静默忽略.
- 输入同时接受驼峰写法(``isArray``/``elementsDivider``/``in``)与下划线写法.
- 嵌套的 ``properties`` 同样会补齐默认值; 嵌套字段的 ``location`` 不参与匹配,
  它们总是从父字段的值中读取.
- 归一化后的定义不可变,可以在多个请求/线程之间共享.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from params_sanitizer.constants import ErrorMessages, FieldDefaults, FieldType, Location
from params_sanitizer.errors import SchemaDefinitionError


class _FieldBase(BaseModel):
    """所有字段变体共享的属性."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: str = ""
    default: Any = FieldDefaults.DEFAULT
    required: bool = FieldDefaults.REQUIRED
    location: Location = Field(
        default=FieldDefaults.LOCATION,
        validation_alias=AliasChoices("location", "in"),
    )

    @property
    def field_type(self) -> FieldType:
        """返回字段类型枚举."""
        return FieldType(getattr(self, "type"))

    def qualified_name(self, prefix: str = "") -> str:
        """返回带父级路径的字段名,例如 ``address.zip``."""
        return f"{prefix}{self.name}"


class _ScalarField(_FieldBase):
    """标量字段: 可以声明为按分隔符拆分的数组."""

    is_array: bool = Field(
        default=FieldDefaults.IS_ARRAY,
        validation_alias=AliasChoices("is_array", "isArray"),
    )
    elements_divider: str = Field(
        default=FieldDefaults.ELEMENTS_DIVIDER,
        validation_alias=AliasChoices("elements_divider", "elementsDivider"),
    )


class StringField(_ScalarField):
    """字符串字段,永远不会被判定为格式错误."""

    type: Literal["string"] = "string"


class NumberField(_ScalarField):
    """数字字段."""

    type: Literal["number"] = "number"


class BooleanField(_ScalarField):
    """布尔字段,只接受 true/false/1/0."""

    type: Literal["boolean"] = "boolean"


class DateField(_ScalarField):
    """日期时间字段."""

    type: Literal["date"] = "date"


class ObjectField(_FieldBase):
    """对象字段,值为 JSON 文本或 mapping,可声明嵌套字段."""

    type: Literal["object"] = "object"
    properties: tuple[FieldDefinition, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _reject_array(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            flag = data.get("is_array", data.get("isArray", False))
            if flag:
                raise ValueError(ErrorMessages.OBJECT_ARRAY_UNSUPPORTED.format(field=data.get("name", "")))
        return data

    @field_validator("properties", mode="before")
    @classmethod
    def _fill_nested_type(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping)):
            return tuple(_with_type_default(item) for item in value)
        return value


FieldDefinition = Annotated[
    StringField | NumberField | BooleanField | DateField | ObjectField,
    Field(discriminator="type"),
]

ObjectField.model_rebuild()

_FIELD_ADAPTER: TypeAdapter[FieldDefinition] = TypeAdapter(FieldDefinition)
_FIELD_MODELS = (StringField, NumberField, BooleanField, DateField, ObjectField)


def _with_type_default(definition: Any) -> Any:
    """缺省 type 时补 string,返回副本而不是修改原对象."""
    if isinstance(definition, _FIELD_MODELS) or not isinstance(definition, Mapping):
        return definition
    payload = dict(definition)
    if payload.get("type") is None:
        payload["type"] = FieldDefaults.TYPE.value
    elif isinstance(payload["type"], FieldType):
        payload["type"] = payload["type"].value
    return payload


def apply_defaults(definition: Mapping[str, Any] | FieldDefinition) -> FieldDefinition:
    """合并默认值,返回完整且不可变的字段定义.

    Args:
        definition: 调用方编写的字段定义(mapping),或已经归一化的字段定义.

    Returns:
        补齐 type/is_array/elements_divider/default/required/location 的字段定义.

    Raises:
        SchemaDefinitionError: type 或 location 不在支持范围内,或 object 字段声明了 isArray.

    """
    if isinstance(definition, _FIELD_MODELS):
        return definition
    try:
        return _FIELD_ADAPTER.validate_python(_with_type_default(definition))
    except PydanticValidationError as exc:
        raise SchemaDefinitionError(
            _describe_first_error(exc),
            extra={"definition": _safe_name(definition)},
        ) from exc


def normalize_definitions(
    definitions: Iterable[Mapping[str, Any] | FieldDefinition],
) -> tuple[FieldDefinition, ...]:
    """对一组字段定义逐个合并默认值,保持原有顺序."""
    return tuple(apply_defaults(definition) for definition in definitions)


def _safe_name(definition: object) -> str:
    if isinstance(definition, Mapping):
        return str(definition.get("name", ""))
    return ""


def _describe_first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ErrorMessages.SCHEMA_DEFINITION_ERROR

    first = errors[0]
    error_type = first.get("type")
    if error_type == "union_tag_invalid":
        ctx = first.get("ctx") or {}
        return ErrorMessages.UNSUPPORTED_FIELD_TYPE.format(value=ctx.get("tag", first.get("input")))
    loc = first.get("loc") or ()
    if loc and loc[-1] in {"location", "in"}:
        return ErrorMessages.UNSUPPORTED_LOCATION.format(value=first.get("input"))

    msg = first.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg
    return ErrorMessages.SCHEMA_DEFINITION_ERROR


__all__ = [
    "BooleanField",
    "DateField",
    "FieldDefinition",
    "NumberField",
    "ObjectField",
    "StringField",
    "apply_defaults",
    "normalize_definitions",
]

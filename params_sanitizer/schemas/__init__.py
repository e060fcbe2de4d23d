"""字段定义与结果结构."""

from .field_definition import (
    BooleanField,
    DateField,
    FieldDefinition,
    NumberField,
    ObjectField,
    StringField,
    apply_defaults,
    normalize_definitions,
)
from .reports import CheckResult, LocationReport, ValueResult

__all__ = [
    "BooleanField",
    "CheckResult",
    "DateField",
    "FieldDefinition",
    "LocationReport",
    "NumberField",
    "ObjectField",
    "StringField",
    "ValueResult",
    "apply_defaults",
    "normalize_definitions",
]

"""参数定义相关常量.

字段类型、参数位置与布尔值的规范表示集中在此,校验与转换共用同一份定义.
"""

from enum import Enum
from typing import ClassVar


class FieldType(str, Enum):
    """参数字段的声明类型."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT = "object"


class Location(str, Enum):
    """参数来源位置."""

    QUERY = "query"
    PATH = "path"
    BODY = "body"


# 校验与结果输出都按此顺序遍历位置
LOCATIONS: tuple[Location, ...] = (Location.QUERY, Location.PATH, Location.BODY)


class FieldDefaults:
    """调用方未声明时补齐的字段默认值."""

    TYPE = FieldType.STRING
    IS_ARRAY = False
    ELEMENTS_DIVIDER = ","
    DEFAULT = None
    REQUIRED = False
    LOCATION = Location.QUERY


class BooleanTokens:
    """布尔值的规范表示.

    bool 是 int 的子类,判断时需要先区分 bool 与数字.
    """

    TRUE_STRINGS: ClassVar[frozenset[str]] = frozenset({"true", "1"})
    FALSE_STRINGS: ClassVar[frozenset[str]] = frozenset({"false", "0"})
    TRUE_NUMBERS: ClassVar[frozenset[int]] = frozenset({1})
    FALSE_NUMBERS: ClassVar[frozenset[int]] = frozenset({0})

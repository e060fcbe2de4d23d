"""通用结构化数据类型别名.

统一请求参数、JSON 与日志上下文的类型声明,避免在各模块中重复定义.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TypeAlias

ScalarValue: TypeAlias = str | int | float | bool | None
PayloadValue: TypeAlias = ScalarValue | Sequence["PayloadValue"] | Mapping[str, "PayloadValue"]
PayloadMapping: TypeAlias = Mapping[str, PayloadValue]
MutablePayloadDict: TypeAlias = dict[str, PayloadValue]
JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]

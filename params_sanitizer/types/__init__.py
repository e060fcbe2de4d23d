"""类型别名集中出口."""

from .structures import (
    JsonValue,
    LoggerExtra,
    MutablePayloadDict,
    PayloadMapping,
    PayloadValue,
    ScalarValue,
    StructlogEventDict,
)

__all__ = [
    "JsonValue",
    "LoggerExtra",
    "MutablePayloadDict",
    "PayloadMapping",
    "PayloadValue",
    "ScalarValue",
    "StructlogEventDict",
]

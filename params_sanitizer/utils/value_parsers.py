"""参数值解析 helper.

说明:
- 校验与转换共用这里的解析规则,保证"校验通过"与"转换结果"口径一致.
- 数字解析沿用 Web 端常见的宽松语义: 空白字符串视为 0,支持 0x/0o/0b 前缀与 Infinity,只认 ASCII 数字.
- 日期解析结果统一为 UTC aware datetime,不带时区的输入按 UTC 解释.
- 这些函数不记录日志、不抛业务异常,无法解析时返回 NaN/None 或抛出 ValueError 由调用方处理.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from datetime import UTC, date, datetime
from email.utils import parsedate_to_datetime

from params_sanitizer.constants import BooleanTokens
from params_sanitizer.types.structures import MutablePayloadDict, PayloadValue

_STRING_LIKE_TYPES = (str, bytes, bytearray)
_ASCII_DIGITS = frozenset("0123456789")
_INFINITY_TOKENS = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}
_FALLBACK_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
)


def _as_text(value: object) -> str:
    if isinstance(value, (bytes, bytearray)):
        return value.decode(errors="ignore")
    return str(value)


def split_elements(value: PayloadValue, divider: str) -> list[PayloadValue]:
    """Split an array field's raw value into its elements.

    字符串按分隔符拆分,分隔符为空串时逐字符拆分;已经是序列(重复的 query key、JSON 数组)时直接按元素返回.
    """
    if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
        return list(value)
    text = _as_text(value)
    if not divider:
        return list(text)
    return list(text.split(divider))


def to_number(value: PayloadValue) -> int | float:
    """Convert to int/float; NaN when the value is not numeric."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, _STRING_LIKE_TYPES):
        return math.nan

    text = _as_text(value).strip()
    if not text:
        return 0
    if text in _INFINITY_TOKENS:
        return _INFINITY_TOKENS[text]
    # Python 的 int/float 接受 "1_000"、"nan"、"inf" 与非 ASCII 数字,这里统一拒绝
    if not text.isascii() or "_" in text or _ASCII_DIGITS.isdisjoint(text):
        return math.nan

    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        try:
            return int(text[2:], radix)
        except ValueError:
            return math.nan

    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def is_number(value: PayloadValue) -> bool:
    """判断值是否能转换为有效数字."""
    return not math.isnan(to_number(value))


def parse_date(value: PayloadValue) -> datetime | None:
    """Parse a calendar date/time; None when the value is not a date.

    支持 ISO 8601(含结尾 Z)、RFC 2822、常见斜杠格式,以及数字形式的毫秒时间戳.
    返回值总是 UTC aware.
    """
    parsed = _parse_date(value)
    return None if parsed is None else _as_utc(parsed)


def _parse_date(value: PayloadValue) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_epoch_millis(value)
    if not isinstance(value, _STRING_LIKE_TYPES):
        return None

    text = _as_text(value).strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def _as_utc(value: datetime) -> datetime | None:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone(UTC)
    except OverflowError:
        return None


def _from_epoch_millis(value: float) -> datetime | None:
    if math.isnan(value) or math.isinf(value):
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def is_date(value: PayloadValue) -> bool:
    """判断值是否能解析为日期时间."""
    return parse_date(value) is not None


def is_canonical_boolean(value: PayloadValue) -> bool:
    """Check membership in the canonical set: true/false/1/0 (str, number or bool)."""
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value in BooleanTokens.TRUE_NUMBERS or value in BooleanTokens.FALSE_NUMBERS
    if isinstance(value, str):
        return value in BooleanTokens.TRUE_STRINGS or value in BooleanTokens.FALSE_STRINGS
    return False


def to_boolean(value: PayloadValue) -> bool:
    """True only for the canonical true representations; everything else is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value in BooleanTokens.TRUE_NUMBERS
    if isinstance(value, str):
        return value in BooleanTokens.TRUE_STRINGS
    return False


def load_mapping(value: PayloadValue) -> MutablePayloadDict:
    """Parse an object field's raw value into a fresh dict.

    字符串按 JSON 解析;已经是 mapping 时浅拷贝一份,避免改写调用方的输入.

    Raises:
        ValueError: 文本不是合法 JSON(含嵌套过深),或解析结果不是 JSON 对象.

    """
    if isinstance(value, Mapping):
        return dict(value)
    if not isinstance(value, _STRING_LIKE_TYPES):
        raise ValueError(f"无法解析为对象: {type(value).__name__}")

    try:
        parsed = json.loads(_as_text(value))
    except RecursionError as exc:
        raise ValueError("JSON 嵌套层级过深") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"JSON 内容不是对象: {type(parsed).__name__}")
    return parsed


__all__ = [
    "is_canonical_boolean",
    "is_date",
    "is_number",
    "load_mapping",
    "parse_date",
    "split_elements",
    "to_boolean",
    "to_number",
]

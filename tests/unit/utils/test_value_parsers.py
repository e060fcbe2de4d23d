import math
from datetime import UTC, datetime

import pytest

from params_sanitizer.utils.value_parsers import (
    is_canonical_boolean,
    is_number,
    load_mapping,
    parse_date,
    split_elements,
    to_boolean,
    to_number,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12", 12),
        (" 1.5 ", 1.5),
        ("-3", -3),
        ("1e3", 1000.0),
        ("", 0),
        ("0x1f", 31),
        ("0b101", 5),
        (7, 7),
        (2.5, 2.5),
        (True, 1),
    ],
)
def test_to_number_converts_numeric_values(raw, expected) -> None:
    assert to_number(raw) == expected


@pytest.mark.unit
def test_to_number_keeps_integral_text_as_int() -> None:
    assert isinstance(to_number("42"), int)
    assert isinstance(to_number("4.2"), float)


@pytest.mark.unit
def test_to_number_accepts_infinity_tokens() -> None:
    assert to_number("Infinity") == math.inf
    assert to_number("-Infinity") == -math.inf


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ["abc", "12abc", "1_000", "nan", "inf", "-", "0x", "\u0661\u0662", "\uff11", {"a": 1}, ["1"]],
)
def test_to_number_returns_nan_for_non_numeric_values(raw) -> None:
    assert math.isnan(to_number(raw))
    assert is_number(raw) is False


@pytest.mark.unit
def test_split_elements_uses_divider_for_text() -> None:
    assert split_elements("a|b|c", "|") == ["a", "b", "c"]
    assert split_elements("single", ",") == ["single"]


@pytest.mark.unit
def test_split_elements_keeps_existing_sequences() -> None:
    assert split_elements(["1", "2"], ",") == ["1", "2"]


@pytest.mark.unit
def test_split_elements_with_empty_divider_splits_characters() -> None:
    assert split_elements("123", "") == ["1", "2", "3"]
    assert split_elements("", "") == []


@pytest.mark.unit
def test_parse_date_accepts_iso_formats() -> None:
    assert parse_date("2024-01-02") == datetime(2024, 1, 2, tzinfo=UTC)
    assert parse_date("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


@pytest.mark.unit
def test_parse_date_accepts_slash_and_rfc2822_formats() -> None:
    assert parse_date("2024/01/02") == datetime(2024, 1, 2, tzinfo=UTC)
    assert parse_date("Tue, 02 Jan 2024 03:04:05 GMT") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


@pytest.mark.unit
def test_parse_date_treats_numbers_as_epoch_milliseconds() -> None:
    assert parse_date(0) == datetime(1970, 1, 1, tzinfo=UTC)
    assert parse_date(1_000) == datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)


@pytest.mark.unit
def test_parse_date_always_returns_utc() -> None:
    assert parse_date("2024-01-02T08:00:00+08:00") == datetime(2024, 1, 2, tzinfo=UTC)
    assert parse_date(datetime(2024, 1, 2)).tzinfo == UTC
    assert parse_date("2024-01-02T10:00:00").tzinfo == UTC


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["not-a-date", "", "2024-13-45", True, {"y": 2024}])
def test_parse_date_returns_none_for_invalid_values(raw) -> None:
    assert parse_date(raw) is None


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["true", "false", "1", "0", 1, 0, True, False])
def test_canonical_boolean_values(raw) -> None:
    assert is_canonical_boolean(raw) is True


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["TRUE", "yes", "maybe", 2, "", None, ["1"]])
def test_non_canonical_boolean_values(raw) -> None:
    assert is_canonical_boolean(raw) is False


@pytest.mark.unit
def test_to_boolean_is_true_only_for_canonical_true_values() -> None:
    assert to_boolean("1") is True
    assert to_boolean("true") is True
    assert to_boolean(1) is True
    assert to_boolean(True) is True
    assert to_boolean("0") is False
    assert to_boolean("maybe") is False
    assert to_boolean("TRUE") is False


@pytest.mark.unit
def test_load_mapping_parses_json_objects() -> None:
    assert load_mapping('{"zip": "123"}') == {"zip": "123"}


@pytest.mark.unit
def test_load_mapping_copies_mappings() -> None:
    source = {"zip": "123"}
    parsed = load_mapping(source)

    assert parsed == source
    assert parsed is not source


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["{bad", "[1, 2]", "5", 5, ["a"]])
def test_load_mapping_rejects_non_objects(raw) -> None:
    with pytest.raises(ValueError):
        load_mapping(raw)


@pytest.mark.unit
def test_load_mapping_rejects_excessively_nested_json() -> None:
    with pytest.raises(ValueError):
        load_mapping("[" * 100_000)

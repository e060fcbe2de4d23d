import pytest

from params_sanitizer import ParamsSanitizer, RequestInputs
from params_sanitizer.errors import SchemaDefinitionError
from params_sanitizer.schemas.field_definition import NumberField


@pytest.mark.unit
def test_sanitizer_normalizes_definitions_once() -> None:
    raw = [{"name": "page", "type": "number", "default": 1}]

    sanitizer = ParamsSanitizer(raw)

    assert isinstance(sanitizer.definitions[0], NumberField)
    assert raw == [{"name": "page", "type": "number", "default": 1}]


@pytest.mark.unit
def test_sanitizer_rejects_invalid_definitions() -> None:
    with pytest.raises(SchemaDefinitionError):
        ParamsSanitizer([{"name": "x", "type": "uuid"}])


@pytest.mark.unit
def test_strict_defaults_to_false() -> None:
    sanitizer = ParamsSanitizer([{"name": "a"}])

    assert sanitizer.strict is False
    assert sanitizer.check(RequestInputs.from_mappings(query={"b": "1"})).status is True


@pytest.mark.unit
def test_strict_default_can_come_from_settings(monkeypatch) -> None:
    from params_sanitizer.settings import get_settings

    monkeypatch.setenv("PARAMS_SANITIZER_STRICT", "true")
    get_settings.cache_clear()

    sanitizer = ParamsSanitizer([{"name": "a"}])

    assert sanitizer.strict is True
    assert sanitizer.check(RequestInputs.from_mappings(query={"b": "1"})).unknown.query == ["b"]


@pytest.mark.unit
def test_explicit_strict_overrides_settings(monkeypatch) -> None:
    from params_sanitizer.settings import get_settings

    monkeypatch.setenv("PARAMS_SANITIZER_STRICT", "true")
    get_settings.cache_clear()

    assert ParamsSanitizer([{"name": "a"}], strict=False).strict is False


@pytest.mark.unit
def test_check_and_values_are_independent() -> None:
    sanitizer = ParamsSanitizer(
        [
            {"name": "flag", "type": "boolean", "required": True},
            {"name": "limit", "type": "number", "default": 20},
        ],
    )
    inputs = RequestInputs.from_mappings(query={"flag": "maybe"})

    values_first = sanitizer.values(inputs)
    report = sanitizer.check(inputs)
    values_second = sanitizer.values(inputs)

    assert report.malformed.query == ["flag"]
    assert values_first == values_second
    assert values_first.query == {"flag": False, "limit": 20}


@pytest.mark.unit
def test_missing_inputs_are_treated_as_empty() -> None:
    sanitizer = ParamsSanitizer([{"name": "id", "in": "path", "required": True}])

    assert sanitizer.check().missing.path == ["id"]
    assert sanitizer.values().to_dict() == {"query": {}, "path": {}, "body": {}}


@pytest.mark.unit
def test_report_serializes_to_location_partitioned_dict() -> None:
    sanitizer = ParamsSanitizer(
        [{"name": "p1", "required": True}, {"name": "n", "in": "body", "type": "number"}],
        strict=True,
    )

    report = sanitizer.check(RequestInputs.from_mappings(query={"p3": "y"}, body={"n": "x"}))

    assert report.to_dict() == {
        "status": False,
        "missing": {"query": ["p1"], "path": [], "body": []},
        "unknown": {"query": ["p3"], "path": [], "body": []},
        "malformed": {"query": [], "path": [], "body": ["n"]},
    }

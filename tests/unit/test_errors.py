import pytest

from params_sanitizer.constants import ErrorCategory, ErrorSeverity
from params_sanitizer.errors import AppError, PayloadParseError, SchemaDefinitionError, ValidationError


@pytest.mark.unit
def test_app_error_uses_metadata_defaults() -> None:
    error = AppError()

    assert error.message == "服务器内部错误"
    assert error.status_code == 500
    assert error.category is ErrorCategory.SYSTEM
    assert error.recoverable is False


@pytest.mark.unit
def test_validation_error_is_recoverable_client_error() -> None:
    error = ValidationError(extra={"status": False})

    assert error.status_code == 400
    assert error.message == "数据验证失败"
    assert error.extra == {"status": False}
    assert error.recoverable is True


@pytest.mark.unit
def test_payload_parse_error_carries_field_name() -> None:
    error = PayloadParseError("address.geo", extra={"reason": "bad json"})

    assert isinstance(error, ValidationError)
    assert error.field == "address.geo"
    assert "address.geo" in error.message
    assert error.extra == {"field": "address.geo", "reason": "bad json"}


@pytest.mark.unit
def test_schema_definition_error_metadata() -> None:
    error = SchemaDefinitionError("bad", severity=ErrorSeverity.CRITICAL)

    assert error.category is ErrorCategory.SCHEMA
    assert error.severity is ErrorSeverity.CRITICAL
    assert str(error) == "bad"

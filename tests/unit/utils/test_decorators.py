import pytest
from flask import Flask, g, jsonify

from params_sanitizer import ParamsSanitizer, ValidationError, validate_params


def _build_app() -> Flask:
    app = Flask(__name__)
    sanitizer = ParamsSanitizer(
        [
            {"name": "user_id", "in": "path", "type": "number", "required": True},
            {"name": "fields", "in": "query", "isArray": True, "default": ["id"]},
            {"name": "notify", "in": "body", "type": "boolean", "default": False},
        ],
        strict=True,
    )

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        return jsonify({"message": error.message, "report": error.extra}), error.status_code

    @app.post("/users/<user_id>")
    @validate_params(sanitizer)
    def update_user(user_id: str):
        return jsonify(
            {
                "user_id": g.params.path["user_id"],
                "fields": g.params.query["fields"],
                "notify": g.params.body["notify"],
            },
        )

    return app


@pytest.mark.unit
def test_validate_params_exposes_coerced_values() -> None:
    client = _build_app().test_client()

    response = client.post("/users/12?fields=id,name", json={"notify": "1"})

    assert response.status_code == 200
    assert response.get_json() == {"user_id": 12, "fields": ["id", "name"], "notify": True}


@pytest.mark.unit
def test_validate_params_applies_defaults() -> None:
    client = _build_app().test_client()

    response = client.post("/users/12", json={})

    assert response.get_json() == {"user_id": 12, "fields": ["id"], "notify": False}


@pytest.mark.unit
def test_validate_params_rejects_invalid_request_with_report() -> None:
    client = _build_app().test_client()

    response = client.post("/users/abc?debug=1", json={"notify": "maybe"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["message"] == "请求参数校验失败"
    assert payload["report"]["status"] is False
    assert payload["report"]["malformed"] == {"query": [], "path": ["user_id"], "body": ["notify"]}
    assert payload["report"]["unknown"]["query"] == ["debug"]

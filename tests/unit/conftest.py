# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离与常用的参数定义.
"""

import pytest

from params_sanitizer.settings import get_settings


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - 避免开发者本机环境变量或 `.env` 影响测试稳定性
    - 每个用例重新读取 Settings
    """
    monkeypatch.delenv("PARAMS_SANITIZER_STRICT", raising=False)
    monkeypatch.setenv("PARAMS_SANITIZER_LOG_JSON", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def address_definitions():
    """带嵌套 object 字段的参数定义."""
    return [
        {"name": "id", "in": "path", "type": "number", "required": True},
        {
            "name": "address",
            "in": "body",
            "type": "object",
            "required": True,
            "properties": [
                {"name": "street", "type": "string", "required": True},
                {"name": "zip", "type": "number"},
                {"name": "verified", "type": "boolean", "default": False},
            ],
        },
    ]

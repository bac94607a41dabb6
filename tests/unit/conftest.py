# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离、Flask 应用与描述表缓存相关的通用 fixtures。
"""

import pytest
from flask import Flask

from formbind.binding.schema import clear_schema_cache


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - 避免开发者本机 FORMBIND_* 环境变量影响测试稳定性
    - 每个用例使用全新的描述表缓存
    """
    for key in (
        "FORMBIND_MAX_CONTENT_LENGTH",
        "FORMBIND_MAX_FORM_MEMORY_SIZE",
        "FORMBIND_MUTATING_METHODS",
    ):
        monkeypatch.delenv(key, raising=False)
    clear_schema_cache()
    yield
    clear_schema_cache()


@pytest.fixture
def app():
    """最小 Flask 应用, 仅用于构造请求上下文."""
    return Flask(__name__)

# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供 monkeypatch 相关的通用 fixtures。
"""

import pytest


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - unit tests 只使用内存 SQLite,不依赖外部数据库
    - 避免开发者本机环境变量影响测试稳定性
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("WTF_CSRF_ENABLED", "false")
    monkeypatch.setenv("BCRYPT_LOG_ROUNDS", "4")
    monkeypatch.delenv("FLASK_DEBUG", raising=False)
    monkeypatch.delenv("POSTS_ADMIN_REQUIRE_LOGIN", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

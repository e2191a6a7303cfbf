# tests/integration/conftest.py
"""集成测试专用 fixtures.

使用临时目录中的 SQLite 文件库,按完整应用(含 CLI 命令)运行。
"""

import pytest

from quill import create_app, db
from quill.settings import Settings


@pytest.fixture(scope="function")
def app(monkeypatch, tmp_path):
    """创建基于文件数据库的测试应用."""
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'quill.db'}")
    monkeypatch.setenv("WTF_CSRF_ENABLED", "false")
    monkeypatch.setenv("BCRYPT_LOG_ROUNDS", "4")
    monkeypatch.setenv("POSTS_ADMIN_REQUIRE_LOGIN", "true")

    app = create_app(settings=Settings.load())
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture(scope="function")
def client(app):
    """测试客户端,每个测试函数独立."""
    return app.test_client()


@pytest.fixture(scope="function")
def runner(app):
    return app.test_cli_runner()

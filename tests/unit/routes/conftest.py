# tests/unit/routes/conftest.py
"""路由测试专用 fixtures.

分别构建开放版本与登录版本的应用,并提供已认证的测试客户端。
"""

import pytest

from quill import create_app, db
from quill.models.post import Post
from quill.models.user import User
from quill.settings import Settings

TEST_PASSWORD = "TestPass1"


def _build_app(monkeypatch, *, require_login: bool, csrf_enabled: bool = False):
    monkeypatch.setenv("POSTS_ADMIN_REQUIRE_LOGIN", "true" if require_login else "false")
    monkeypatch.setenv("WTF_CSRF_ENABLED", "true" if csrf_enabled else "false")
    app = create_app(settings=Settings.load())
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
        db.session.add_all(
            [
                Post(slug="my-first-post", title="My First Post", markdown="# First"),
                Post(slug="90s-mixtape", title="A Mixtape I Made Just For You", markdown="# Mixtape"),
            ],
        )
        db.session.add(User(username="test_admin", password=TEST_PASSWORD))
        db.session.commit()
    return app


@pytest.fixture(scope="function")
def open_app(monkeypatch):
    """无需登录的文章管理页."""
    return _build_app(monkeypatch, require_login=False)


@pytest.fixture(scope="function")
def secured_app(monkeypatch):
    """需要登录的文章管理页(带删除确认)."""
    return _build_app(monkeypatch, require_login=True)


@pytest.fixture(scope="function")
def csrf_secured_app(monkeypatch):
    """开启 CSRF 校验的登录版本."""
    return _build_app(monkeypatch, require_login=True, csrf_enabled=True)


@pytest.fixture(scope="function")
def open_client(open_app):
    return open_app.test_client()


@pytest.fixture(scope="function")
def secured_client(secured_app):
    return secured_app.test_client()


def _login_client(app):
    with app.app_context():
        user_id = db.session.query(User).filter_by(username="test_admin").one().id

    client = app.test_client()
    with client.session_transaction() as session:
        session["_user_id"] = str(user_id)
    return client


@pytest.fixture(scope="function")
def auth_client(secured_app):
    """已登录的测试客户端."""
    return _login_client(secured_app)


@pytest.fixture(scope="function")
def csrf_auth_client(csrf_secured_app):
    """开启 CSRF 校验且已登录的测试客户端."""
    return _login_client(csrf_secured_app)


@pytest.fixture(scope="function")
def get_post():
    """在独立应用上下文中按 slug 读取文章."""

    def _get(app, slug):
        with app.app_context():
            return db.session.get(Post, slug)

    return _get

# tests/unit/services/conftest.py
"""服务层测试 fixtures: 内存 SQLite 与预置文章."""

import pytest

from quill import create_app, db
from quill.models.post import Post
from quill.settings import Settings


@pytest.fixture(scope="function")
def app():
    """创建带空表的测试应用,并在整个测试期间保持应用上下文."""
    app = create_app(settings=Settings.load())
    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def seeded_posts(app):
    posts = [
        Post(slug="my-first-post", title="My First Post", markdown="# First"),
        Post(slug="90s-mixtape", title="A Mixtape I Made Just For You", markdown="# Mixtape"),
    ]
    db.session.add_all(posts)
    db.session.commit()
    return posts

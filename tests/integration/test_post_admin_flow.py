"""
文章管理端到端流程集成测试
"""

import pytest

from quill import db
from quill.models.post import Post
from quill.models.user import User

ADMIN_PASSWORD = "AdminPass1"


@pytest.mark.integration
def test_seed_posts_is_idempotent(app, runner):
    first = runner.invoke(args=["seed-posts"])
    second = runner.invoke(args=["seed-posts"])

    assert first.exit_code == 0
    assert "已写入 2 篇演示文章" in first.output
    assert second.exit_code == 0
    assert "已写入 0 篇演示文章" in second.output
    with app.app_context():
        assert db.session.query(Post).count() == 2


@pytest.mark.integration
def test_create_admin_creates_then_resets_password(app, runner):
    created = runner.invoke(args=["create-admin", "--username", "editor", "--password", ADMIN_PASSWORD])
    reset = runner.invoke(args=["create-admin", "--username", "editor", "--password", "OtherPass2"])

    assert created.exit_code == 0
    assert reset.exit_code == 0
    with app.app_context():
        user = db.session.query(User).filter_by(username="editor").one()
        assert user.check_password("OtherPass2")


@pytest.mark.integration
def test_create_admin_rejects_weak_password(runner):
    result = runner.invoke(args=["create-admin", "--username", "editor", "--password", "weak"])

    assert result.exit_code != 0
    assert "密码长度至少8位" in result.output


@pytest.mark.integration
def test_login_edit_confirm_and_delete(app, client, runner):
    runner.invoke(args=["seed-posts"])
    runner.invoke(args=["create-admin", "--username", "editor", "--password", ADMIN_PASSWORD])

    login = client.post(
        "/auth/login?next=/posts/admin/my-first-post",
        data={"username": "editor", "password": ADMIN_PASSWORD},
    )
    assert login.status_code == 302

    page = client.get("/posts/admin/my-first-post")
    assert page.status_code == 200
    assert "My First Post" in page.get_data(as_text=True)

    renamed = client.post(
        "/posts/admin/my-first-post",
        data={
            "initialSlug": "my-first-post",
            "title": "My First Post (edited)",
            "slug": "first-post",
            "markdown": "# Edited",
        },
    )
    assert renamed.status_code == 302

    listing = client.get("/posts/admin")
    assert "My First Post (edited)" in listing.get_data(as_text=True)
    assert "文章更新成功" in listing.get_data(as_text=True)

    confirm = client.post(
        "/posts/admin/first-post",
        data={"_action": "confirm-delete", "initialSlug": "first-post", "slug": "first-post"},
    )
    assert confirm.status_code == 200
    with app.app_context():
        assert db.session.get(Post, "first-post") is not None

    deleted = client.post("/posts/admin/first-post", data={"_action": "delete", "slug": "first-post"})
    assert deleted.status_code == 302
    with app.app_context():
        assert db.session.get(Post, "first-post") is None
        assert db.session.get(Post, "90s-mixtape") is not None

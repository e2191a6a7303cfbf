"""文章写服务单元测试."""

import pytest
from sqlalchemy.exc import OperationalError

from quill import db
from quill.errors import ConflictError, DatabaseError, NotFoundError
from quill.models.post import Post
from quill.repositories.posts_repository import PostsRepository
from quill.services.posts.post_write_service import PostWriteService


@pytest.mark.unit
def test_update_post_changes_fields_in_place(seeded_posts) -> None:
    service = PostWriteService()

    service.update_post("my-first-post", title="Edited", slug="my-first-post", markdown="# Edited")

    db.session.expire_all()
    post = db.session.get(Post, "my-first-post")
    assert post is not None
    assert post.title == "Edited"
    assert post.markdown == "# Edited"


@pytest.mark.unit
def test_update_post_can_rename_slug(seeded_posts) -> None:
    service = PostWriteService()

    service.update_post("my-first-post", title="My First Post", slug="renamed", markdown="# First")

    db.session.expire_all()
    assert db.session.get(Post, "my-first-post") is None
    renamed = db.session.get(Post, "renamed")
    assert renamed is not None
    assert renamed.title == "My First Post"


@pytest.mark.unit
def test_update_post_rejects_rename_onto_existing_slug(seeded_posts) -> None:
    service = PostWriteService()

    with pytest.raises(ConflictError, match="90s-mixtape"):
        service.update_post("my-first-post", title="X", slug="90s-mixtape", markdown="Y")

    db.session.expire_all()
    assert db.session.get(Post, "my-first-post").title == "My First Post"
    assert db.session.get(Post, "90s-mixtape").title == "A Mixtape I Made Just For You"


@pytest.mark.unit
def test_update_missing_post_raises_not_found(app) -> None:
    with pytest.raises(NotFoundError, match="Post not found: ghost"):
        PostWriteService().update_post("ghost", title="T", slug="ghost", markdown="M")


@pytest.mark.unit
def test_delete_post_removes_row(seeded_posts) -> None:
    PostWriteService().delete_post("90s-mixtape")

    db.session.expire_all()
    assert db.session.get(Post, "90s-mixtape") is None
    assert db.session.get(Post, "my-first-post") is not None


@pytest.mark.unit
@pytest.mark.parametrize("slug", [None, "", "ghost"])
def test_delete_unknown_or_missing_slug_raises_not_found(app, slug) -> None:
    with pytest.raises(NotFoundError):
        PostWriteService().delete_post(slug)


@pytest.mark.unit
def test_create_post_rejects_duplicate_slug(seeded_posts) -> None:
    with pytest.raises(ConflictError):
        PostWriteService().create_post(slug="my-first-post", title="Dup", markdown="Dup")


@pytest.mark.unit
def test_commit_failure_rolls_back_and_raises_database_error(seeded_posts, monkeypatch) -> None:
    def _broken_add(post):
        raise OperationalError("UPDATE posts", {}, Exception("disk I/O error"))

    repository = PostsRepository()
    monkeypatch.setattr(repository, "add", _broken_add)
    service = PostWriteService(repository=repository)

    with pytest.raises(DatabaseError):
        service.update_post("my-first-post", title="Changed", slug="my-first-post", markdown="M")

    db.session.expire_all()
    assert db.session.get(Post, "my-first-post").title == "My First Post"


@pytest.mark.unit
def test_update_logs_success_event(seeded_posts, monkeypatch) -> None:
    events = []
    monkeypatch.setattr(
        "quill.services.posts.post_write_service.log_info",
        lambda message, **kwargs: events.append((message, kwargs)),
    )

    PostWriteService().update_post("my-first-post", title="T", slug="first", markdown="M")

    assert events == [("文章更新成功", {"module": "posts", "initial_slug": "my-first-post", "slug": "first"})]

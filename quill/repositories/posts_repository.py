"""文章 Repository.

职责:
- 仅负责 Query 组装与数据库读写
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from typing import cast

from sqlalchemy.sql.elements import ColumnElement

from quill import db
from quill.models.post import Post


class PostsRepository:
    """文章查询与写入 Repository."""

    @staticmethod
    def get_by_slug(slug: str) -> Post | None:
        return db.session.get(Post, slug)

    @staticmethod
    def list_all() -> list[Post]:
        """按标题升序返回全部文章."""
        title_column = cast(ColumnElement[str], Post.title)
        slug_column = cast(ColumnElement[str], Post.slug)
        return list(db.session.query(Post).order_by(title_column.asc(), slug_column.asc()).all())

    @staticmethod
    def add(post: Post) -> Post:
        db.session.add(post)
        db.session.flush()
        return post

    @staticmethod
    def delete(post: Post) -> None:
        db.session.delete(post)
        db.session.flush()

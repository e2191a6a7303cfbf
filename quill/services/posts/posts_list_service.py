"""文章列表 Service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quill.repositories.posts_repository import PostsRepository

if TYPE_CHECKING:
    from quill.models.post import Post


@dataclass(slots=True)
class PostListItem:
    """列表页的一行."""

    slug: str
    title: str

    def to_dict(self) -> dict[str, str]:
        return {"slug": self.slug, "title": self.title}


class PostsListService:
    """文章列表读取服务."""

    def __init__(self, repository: PostsRepository | None = None) -> None:
        self._repository = repository or PostsRepository()

    def list_posts(self) -> list[PostListItem]:
        posts: list[Post] = self._repository.list_all()
        return [PostListItem(slug=post.slug, title=post.title) for post in posts]

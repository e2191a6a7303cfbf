"""文章详情 Service.

职责:
- 组织 repository 调用
- 不做 Query 细节、不做序列化/Response、不 commit
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quill.repositories.posts_repository import PostsRepository

if TYPE_CHECKING:
    from quill.models.post import Post


class PostReadService:
    """文章详情读取服务."""

    def __init__(self, repository: PostsRepository | None = None) -> None:
        """初始化服务并注入文章仓库."""
        self._repository = repository or PostsRepository()

    def get_post(self, slug: str) -> Post | None:
        """按 slug 获取文章(可为空)."""
        return self._repository.get_by_slug(slug)

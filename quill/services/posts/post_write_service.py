"""文章写操作 Service.

职责:
- 处理文章的创建/更新/删除编排
- 调用 repository 执行 add/delete/flush
- 负责提交事务,数据库异常时回滚并转换为业务异常
- 不返回 Response
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quill import db
from quill.constants.system_constants import SuccessMessages
from quill.errors import ConflictError, DatabaseError, NotFoundError
from quill.models.post import Post
from quill.repositories.posts_repository import PostsRepository
from quill.utils.structlog_config import log_info

if TYPE_CHECKING:
    from collections.abc import Callable


class PostWriteService:
    """文章写操作服务."""

    def __init__(self, repository: PostsRepository | None = None) -> None:
        """初始化写操作服务."""
        self._repository = repository or PostsRepository()

    def create_post(self, *, slug: str, title: str, markdown: str) -> Post:
        """创建文章.

        Raises:
            ConflictError: slug 已被其他文章占用.

        """
        if self._repository.get_by_slug(slug) is not None:
            raise ConflictError(f"Slug already exists: {slug}", extra={"slug": slug})

        post = Post(slug=slug, title=title, markdown=markdown)
        self._commit(lambda: self._repository.add(post), slug=slug)
        log_info("文章创建成功", module="posts", slug=slug)
        return post

    def update_post(self, initial_slug: str, *, title: str, slug: str, markdown: str) -> Post:
        """按原 slug 定位文章并整体更新,允许修改 slug.

        Args:
            initial_slug: 编辑前的 slug.
            title: 新标题.
            slug: 新 slug,可与 initial_slug 相同.
            markdown: 新正文.

        Raises:
            NotFoundError: 原 slug 对应的文章不存在.
            ConflictError: 新 slug 已被其他文章占用.
            DatabaseError: 提交失败.

        """
        post = self._repository.get_by_slug(initial_slug)
        if post is None:
            raise NotFoundError(f"Post not found: {initial_slug}", extra={"slug": initial_slug})

        if slug != initial_slug and self._repository.get_by_slug(slug) is not None:
            raise ConflictError(
                f"Slug already exists: {slug}",
                extra={"initial_slug": initial_slug, "slug": slug},
            )

        post.title = title
        post.slug = slug
        post.markdown = markdown
        self._commit(lambda: self._repository.add(post), slug=slug)

        log_info(SuccessMessages.POST_UPDATED, module="posts", initial_slug=initial_slug, slug=slug)
        return post

    def delete_post(self, slug: object) -> None:
        """删除文章.

        slug 原样来自表单,非字符串或空值一律视为不存在.

        Raises:
            NotFoundError: 文章不存在.
            DatabaseError: 提交失败.

        """
        post = self._repository.get_by_slug(slug) if isinstance(slug, str) and slug else None
        if post is None:
            raise NotFoundError(f"Post not found: {slug}", extra={"slug": str(slug)})

        self._commit(lambda: self._repository.delete(post), slug=slug)
        log_info(SuccessMessages.POST_DELETED, module="posts", slug=slug)

    @staticmethod
    def _commit(operation: Callable[[], object], *, slug: object) -> None:
        try:
            operation()
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise ConflictError(
                f"Slug already exists: {slug}",
                extra={"slug": str(slug), "exception": str(exc.orig)},
            ) from exc
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise DatabaseError("保存失败,请稍后再试", extra={"slug": str(slug), "exception": str(exc)}) from exc

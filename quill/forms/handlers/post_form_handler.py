"""文章编辑表单处理器(View layer).

约束:
- 不直接访问数据库
- load/submit 均通过 Service 完成
- 每次提交最多触发一次写操作(删除或更新)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, cast

from quill.constants import PostFormAction, PostFormMessages
from quill.errors import NotFoundError, invariant
from quill.services.posts.post_read_service import PostReadService
from quill.services.posts.post_write_service import PostWriteService

if TYPE_CHECKING:
    from collections.abc import Mapping

    from quill.models.post import Post


@dataclass(frozen=True, slots=True)
class DeletePostSubmission:
    """`_action=delete` 的提交,slug 取自表单原值."""

    slug: str | None


@dataclass(frozen=True, slots=True)
class UpdatePostSubmission:
    """更新提交,字段缺失时为 None."""

    initial_slug: object
    title: str | None
    slug: str | None
    markdown: str | None


PostSubmission = DeletePostSubmission | UpdatePostSubmission


@dataclass(frozen=True, slots=True)
class PostFormErrors:
    """字段级校验结果,通过的字段为 None."""

    title: str | None = None
    slug: str | None = None
    markdown: str | None = None

    @property
    def has_errors(self) -> bool:
        return any((self.title, self.slug, self.markdown))

    def to_dict(self) -> dict[str, str | None]:
        return {"title": self.title, "slug": self.slug, "markdown": self.markdown}


@dataclass(frozen=True, slots=True)
class PostFormOutcome:
    """一次提交的处理结果."""

    status: Literal["deleted", "updated", "invalid"]
    slug: str | None = None
    errors: PostFormErrors | None = None


def _text(value: object) -> str | None:
    return value if isinstance(value, str) else None


class PostFormHandler:
    """文章编辑表单处理器."""

    def __init__(
        self,
        *,
        read_service: PostReadService | None = None,
        write_service: PostWriteService | None = None,
    ) -> None:
        self._read_service = read_service or PostReadService()
        self._write_service = write_service or PostWriteService()

    def load(self, slug: str | None) -> Post:
        """按路由参数加载文章.

        Raises:
            InvariantError: 路由参数缺失.
            NotFoundError: 文章不存在.

        """
        route_slug = invariant(slug, "params.slug is required")
        post = self._read_service.get_post(route_slug)
        if post is None:
            raise NotFoundError(f"Post not found: {route_slug}", extra={"slug": route_slug})
        return post

    @staticmethod
    def parse(payload: Mapping[str, object]) -> PostSubmission:
        """把原始表单数据解析为删除或更新提交."""
        if payload.get(PostFormAction.FIELD) == PostFormAction.DELETE:
            return DeletePostSubmission(slug=_text(payload.get("slug")))
        return UpdatePostSubmission(
            initial_slug=payload.get("initialSlug"),
            title=_text(payload.get("title")),
            slug=_text(payload.get("slug")),
            markdown=_text(payload.get("markdown")),
        )

    @staticmethod
    def validate(submission: UpdatePostSubmission) -> PostFormErrors:
        """空串与缺失均视为未填写,空白字符不做裁剪."""
        return PostFormErrors(
            title=None if submission.title else PostFormMessages.TITLE_REQUIRED,
            slug=None if submission.slug else PostFormMessages.SLUG_REQUIRED,
            markdown=None if submission.markdown else PostFormMessages.MARKDOWN_REQUIRED,
        )

    def submit(self, submission: PostSubmission) -> PostFormOutcome:
        """执行删除或校验并更新.

        Raises:
            InvariantError: 更新时 initialSlug 不是字符串.
            NotFoundError: 目标文章不存在.
            ConflictError: 新 slug 已被占用.

        """
        if isinstance(submission, DeletePostSubmission):
            self._write_service.delete_post(submission.slug)
            return PostFormOutcome(status="deleted", slug=submission.slug)

        errors = self.validate(submission)
        if errors.has_errors:
            return PostFormOutcome(status="invalid", errors=errors)

        initial_slug = submission.initial_slug
        invariant(isinstance(initial_slug, str), "initial slug must be a string")

        # 以下字段已通过非空校验
        self._write_service.update_post(
            cast("str", initial_slug),
            title=cast("str", submission.title),
            slug=cast("str", submission.slug),
            markdown=cast("str", submission.markdown),
        )
        return PostFormOutcome(status="updated", slug=submission.slug)

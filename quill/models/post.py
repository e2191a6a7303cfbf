"""Quill - 文章模型."""

from quill import db
from quill.utils.time_utils import time_utils


class Post(db.Model):
    """文章模型.

    slug 既是文章的 URL 标识,也是主键;改名即更新主键.

    Attributes:
        slug: 文章标识,主键.
        title: 标题.
        markdown: Markdown 正文.
        created_at: 创建时间.
        updated_at: 更新时间.

    """

    __tablename__ = "posts"

    slug = db.Column(db.String(255), primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    markdown = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=time_utils.now)
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=time_utils.now,
        onupdate=time_utils.now,
    )

    def __init__(self, slug: str, title: str, markdown: str) -> None:
        """初始化文章.

        Args:
            slug: 文章标识.
            title: 标题.
            markdown: Markdown 正文.

        """
        self.slug = slug
        self.title = title
        self.markdown = markdown

    def to_dict(self) -> dict[str, str | None]:
        """转换为 JSON 可序列化的字典."""
        return {
            "slug": self.slug,
            "title": self.title,
            "markdown": self.markdown,
            "created_at": time_utils.to_json_serializable(self.created_at),
            "updated_at": time_utils.to_json_serializable(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<Post {self.slug}>"

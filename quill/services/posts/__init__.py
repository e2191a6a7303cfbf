"""文章相关服务."""

from .post_read_service import PostReadService
from .post_write_service import PostWriteService
from .posts_list_service import PostsListService

__all__ = ["PostReadService", "PostWriteService", "PostsListService"]

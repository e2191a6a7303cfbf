"""文章编辑表单常量.

表单字段名沿用页面约定(`_action`、`initialSlug`),前端脚本与模板共用同一组取值.
"""


class PostFormAction:
    """`_action` 判别字段的取值."""

    FIELD = "_action"
    DELETE = "delete"
    # 仅认证版本使用: 打开删除确认对话框,不触发任何写操作
    CONFIRM_DELETE = "confirm-delete"


class PostFormMessages:
    """字段级校验提示与按钮文案."""

    TITLE_REQUIRED = "Title is required"
    SLUG_REQUIRED = "Slug is required"
    MARKDOWN_REQUIRED = "Markdown is required"

    UPDATE_LABEL = "Update Post"
    UPDATE_BUSY_LABEL = "Updating..."
    DELETE_LABEL = "Delete Post"
    DELETE_BUSY_LABEL = "Deleting..."

    CONFIRM_DELETE_TITLE = "Delete this post?"
    CONFIRM_DELETE_BODY = "This permanently removes the post. This cannot be undone."
    CONFIRM_DELETE_ACCEPT = "Delete"
    CONFIRM_DELETE_CANCEL = "Cancel"

"""Quill - 文章管理路由."""

from collections.abc import Callable
from typing import cast

from flask import Blueprint, current_app, jsonify, render_template
from flask.typing import ResponseReturnValue

from quill.services.posts.posts_list_service import PostsListService
from quill.utils.decorators import require_user_id
from quill.utils.response_utils import prefers_json_response
from quill.views.post_form_view import PostEditView, SecuredPostEditView

# 创建蓝图
posts_bp = Blueprint("posts", __name__)

_open_edit_view = cast(Callable[..., ResponseReturnValue], PostEditView.as_view("post_edit_open"))
_secured_edit_view = cast(Callable[..., ResponseReturnValue], SecuredPostEditView.as_view("post_edit_secured"))


def _login_enforced() -> bool:
    return bool(current_app.config.get("POSTS_ADMIN_REQUIRE_LOGIN", True))


@posts_bp.route("/admin")
def admin_index() -> ResponseReturnValue:
    """文章管理列表,按标题排序."""
    if _login_enforced():
        require_user_id()

    posts = PostsListService().list_posts()
    if prefers_json_response():
        return jsonify({"posts": [item.to_dict() for item in posts]})
    return render_template("posts/admin/index.html", posts=posts)


def admin_edit(slug: str) -> ResponseReturnValue:
    """文章编辑页,按 POSTS_ADMIN_REQUIRE_LOGIN 选择开放或登录版本."""
    view = _secured_edit_view if _login_enforced() else _open_edit_view
    return view(slug=slug)


posts_bp.add_url_rule(
    "/admin/<slug>",
    view_func=admin_edit,
    methods=["GET", "POST"],
    endpoint="admin_edit",
)

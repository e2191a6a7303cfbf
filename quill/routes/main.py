"""Quill - 首页路由."""

from flask import Blueprint, redirect, url_for
from flask.typing import ResponseReturnValue

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index() -> ResponseReturnValue:
    """首页跳转到文章管理列表."""
    return redirect(url_for("posts.admin_index"))

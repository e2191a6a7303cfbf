"""Quill - 用户认证路由."""

from flask import Blueprint, flash, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue
from flask_login import current_user

from quill.constants import FlashCategory, HttpHeaders, HttpMethod
from quill.constants.system_constants import SuccessMessages
from quill.errors import AuthenticationError
from quill.services.auth.login_service import LoginService
from quill.utils.redirect_safety import resolve_safe_redirect_target
from quill.utils.structlog_config import get_auth_logger

# 创建蓝图
auth_bp = Blueprint("auth", __name__)

# 获取认证日志记录器
auth_logger = get_auth_logger()


@auth_bp.route("/login", methods=["GET", "POST"])
def login() -> ResponseReturnValue:
    """用户登录页面.

    GET 请求渲染登录页面,POST 请求处理登录逻辑.

    Query Parameters:
        next: 登录成功后的重定向地址,仅接受站内路径.

    """
    next_target = request.args.get("next")
    if request.method != HttpMethod.POST:
        return render_template("auth/login.html", next_target=next_target)

    username = request.form.get("username", "")
    password = request.form.get("password", "")
    if not username or not password:
        auth_logger.warning(
            "页面登录失败:用户名或密码为空",
            username=username,
            ip_address=request.remote_addr,
        )
        flash("用户名和密码不能为空", FlashCategory.ERROR)
        return render_template("auth/login.html", next_target=next_target)

    try:
        LoginService().login(username=username, password=password, remember=bool(request.form.get("remember")))
    except AuthenticationError as exc:
        flash(exc.message, FlashCategory.ERROR)
        return render_template("auth/login.html", next_target=next_target)

    flash(SuccessMessages.LOGIN_SUCCESS, FlashCategory.SUCCESS)
    return redirect(resolve_safe_redirect_target(next_target, fallback=url_for("posts.admin_index")))


@auth_bp.route("/logout", methods=["GET", "POST"])
def logout() -> ResponseReturnValue:
    """清除用户会话并重定向到登录页面."""
    user_id = current_user.id if current_user.is_authenticated else None
    auth_logger.info(
        "收到登出请求",
        user_id=user_id,
        ip_address=request.remote_addr,
        user_agent=request.headers.get(HttpHeaders.USER_AGENT),
    )
    LoginService.logout(user_id)
    flash(SuccessMessages.LOGOUT_SUCCESS, FlashCategory.INFO)
    return redirect(url_for("auth.login"))

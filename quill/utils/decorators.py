"""
Quill - 认证装饰器与登录态守卫
"""

from functools import wraps
from typing import Any

from flask import request
from flask_login import current_user

from quill.constants import HttpHeaders
from quill.constants.system_constants import ErrorMessages
from quill.errors import AuthenticationError
from quill.utils.structlog_config import get_system_logger, should_log_debug


def require_user_id() -> int:
    """返回当前登录用户的 ID,未登录时立即终止请求。

    未认证时抛出 AuthenticationError,由全局错误处理器决定响应形式:
    页面请求重定向到登录页(携带 next),JSON 请求返回 401。

    Returns:
        当前登录用户 ID。

    Raises:
        AuthenticationError: 当前请求没有有效登录态。
    """
    system_logger = get_system_logger()

    if not current_user.is_authenticated:
        system_logger.warning(
            "未认证访问受保护资源",
            module="decorators",
            user_id=None,
            request_path=request.path,
            request_method=request.method,
            ip_address=request.remote_addr,
            user_agent=request.headers.get(HttpHeaders.USER_AGENT, ""),
            failure_reason="not_authenticated",
        )
        raise AuthenticationError(
            ErrorMessages.AUTHENTICATION_REQUIRED,
            message_key="AUTHENTICATION_REQUIRED",
            extra={"request_path": request.path, "request_method": request.method},
        )

    if should_log_debug():
        system_logger.debug(
            "登录权限验证通过",
            module="decorators",
            user_id=current_user.id,
            username=current_user.username,
            request_path=request.path,
            request_method=request.method,
        )
    return int(current_user.id)


def login_required(f: Any) -> Any:  # noqa: ANN401
    """要求调用者已登录的装饰器。"""

    @wraps(f)
    def decorated_function(*args, **kwargs: Any) -> Any:  # noqa: ANN401
        require_user_id()
        return f(*args, **kwargs)

    return decorated_function

"""登录 Service.

职责:
- 负责用户名/密码认证(避免路由层直接 query + check_password)
- 写入 Flask-Login 会话并记录最后登录时间
- 不返回 Response
"""

from __future__ import annotations

from dataclasses import dataclass

from flask_login import login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from quill import db
from quill.constants.system_constants import ErrorMessages
from quill.errors import AuthenticationError, DatabaseError
from quill.models.user import User
from quill.repositories.users_repository import UsersRepository
from quill.utils.structlog_config import get_auth_logger
from quill.utils.time_utils import time_utils


@dataclass(frozen=True, slots=True)
class LoginResult:
    """登录结果."""

    user_id: int
    username: str


class LoginService:
    """登录编排服务."""

    def __init__(self, repository: UsersRepository | None = None) -> None:
        self._repository = repository or UsersRepository()

    def authenticate(self, *, username: str, password: str) -> User | None:
        """认证用户名与密码.

        Returns:
            User | None: 认证成功返回 User,否则返回 None.

        """
        user = self._repository.get_by_username(username)
        if user and user.check_password(password):
            return user
        return None

    def login(self, *, username: str, password: str, remember: bool = False) -> LoginResult:
        """登录入口: 认证、校验启用状态并写入会话.

        Raises:
            AuthenticationError: 用户名或密码错误,或账户已被禁用.

        """
        auth_logger = get_auth_logger()
        user = self.authenticate(username=username, password=password)
        if not user:
            auth_logger.warning("登录失败", module="auth", username=username, failure_reason="invalid_credentials")
            raise AuthenticationError(ErrorMessages.INVALID_CREDENTIALS, message_key="INVALID_CREDENTIALS")
        if not user.is_active:
            auth_logger.warning("登录失败", module="auth", username=username, failure_reason="account_disabled")
            raise AuthenticationError(ErrorMessages.ACCOUNT_DISABLED, message_key="ACCOUNT_DISABLED")

        login_user(user, remember=remember)
        user.last_login = time_utils.now()
        try:
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise DatabaseError(extra={"user_id": user.id, "exception": str(exc)}) from exc

        auth_logger.info("用户登录成功", module="auth", user_id=user.id, username=user.username)
        return LoginResult(user_id=user.id, username=user.username)

    @staticmethod
    def logout(user_id: int | None) -> None:
        logout_user()
        get_auth_logger().info("用户登出", module="auth", user_id=user_id)

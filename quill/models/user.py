"""Quill - 后台用户模型."""

from flask_login import UserMixin

from quill import bcrypt, db
from quill.utils.time_utils import time_utils

MIN_USER_PASSWORD_LENGTH = 8


class User(UserMixin, db.Model):
    """后台用户模型.

    文章管理页在开启登录保护时,仅允许已登录的用户访问.

    Attributes:
        id: 用户 ID,主键.
        username: 用户名,唯一索引.
        password: 加密后的密码(bcrypt).
        created_at: 创建时间.
        last_login: 最后登录时间.
        is_active: 是否启用.

    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=time_utils.now)
    last_login = db.Column(db.DateTime(timezone=True), nullable=True)
    is_active: bool = db.Column(db.Boolean, default=True, nullable=False)  # pyright: ignore[reportIncompatibleMethodOverride]

    def __init__(self, username: str | None = None, password: str | None = None) -> None:
        if username is not None:
            self.username = username
        if password is not None:
            self.set_password(password)
        self.is_active = True

    def set_password(self, password: str) -> None:
        """校验强度后以 bcrypt 保存密码.

        Raises:
            ValueError: 密码长度不足或缺少大小写字母、数字.

        """
        if len(password) < MIN_USER_PASSWORD_LENGTH:
            error_msg = f"密码长度至少{MIN_USER_PASSWORD_LENGTH}位"
            raise ValueError(error_msg)
        if not any(c.isupper() for c in password):
            error_msg = "密码必须包含大写字母"
            raise ValueError(error_msg)
        if not any(c.islower() for c in password):
            error_msg = "密码必须包含小写字母"
            raise ValueError(error_msg)
        if not any(c.isdigit() for c in password):
            error_msg = "密码必须包含数字"
            raise ValueError(error_msg)

        # 轮数取自 BCRYPT_LOG_ROUNDS 配置
        self.password = bcrypt.generate_password_hash(password).decode("utf-8")

    def check_password(self, password: str) -> bool:
        """验证密码."""
        return bcrypt.check_password_hash(self.password, password)

    def __repr__(self) -> str:
        return f"<User {self.username}>"

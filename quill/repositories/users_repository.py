"""用户 Repository."""

from __future__ import annotations

from quill import db
from quill.models.user import User


class UsersRepository:
    """后台用户查询 Repository."""

    @staticmethod
    def get_by_id(user_id: int) -> User | None:
        return db.session.get(User, user_id)

    @staticmethod
    def get_by_username(username: str) -> User | None:
        return db.session.query(User).filter(User.username == username).first()

    @staticmethod
    def add(user: User) -> User:
        db.session.add(user)
        db.session.flush()
        return user

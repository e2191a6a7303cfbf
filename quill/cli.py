"""Quill - Flask 命令行.

- `flask create-admin`: 创建或重置后台账号
- `flask seed-posts`: 写入演示文章
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from quill import db
from quill.errors import ConflictError
from quill.models.user import User
from quill.repositories.users_repository import UsersRepository
from quill.services.posts.post_write_service import PostWriteService
from quill.utils.structlog_config import get_system_logger

if TYPE_CHECKING:
    from flask import Flask

DEMO_POSTS: tuple[tuple[str, str, str], ...] = (
    (
        "my-first-post",
        "My First Post",
        "# This is my first post\n\nIsn't it great?",
    ),
    (
        "90s-mixtape",
        "A Mixtape I Made Just For You",
        "# 90s Mixtape\n\n- I wish (Skee-Lo)\n- This Is How We Do It (Montell Jordan)\n- Everlong (Foo Fighters)",
    ),
)


@click.command("create-admin")
@click.option("--username", default="admin", show_default=True, help="后台账号用户名")
@click.password_option(help="后台账号密码(至少8位,包含大小写字母与数字)")
@with_appcontext
def create_admin_command(username: str, password: str) -> None:
    """创建后台账号,账号已存在时重置其密码."""
    logger = get_system_logger()
    repository = UsersRepository()
    user = repository.get_by_username(username)
    created = user is None
    try:
        if user is None:
            user = repository.add(User(username=username, password=password))
        else:
            user.set_password(password)
            user.is_active = True
        db.session.commit()
    except ValueError as exc:
        db.session.rollback()
        raise click.BadParameter(str(exc), param_hint="--password") from exc
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise click.ClickException(f"保存账号失败: {exc}") from exc

    logger.info("后台账号已就绪", module="cli", username=username, created=created)
    click.echo(f"{'创建' if created else '更新'}账号: {username}")


@click.command("seed-posts")
@with_appcontext
def seed_posts_command() -> None:
    """写入演示文章,已存在的 slug 会被跳过."""
    service = PostWriteService()
    created = 0
    for slug, title, markdown in DEMO_POSTS:
        try:
            service.create_post(slug=slug, title=title, markdown=markdown)
        except ConflictError:
            click.echo(f"跳过已存在的文章: {slug}")
            continue
        created += 1
    click.echo(f"已写入 {created} 篇演示文章")


def register_commands(app: Flask) -> None:
    """注册 Flask CLI 命令."""
    app.cli.add_command(create_admin_command)
    app.cli.add_command(seed_posts_command)

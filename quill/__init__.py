"""Quill - Flask 应用初始化.

基于Flask的博客后台,提供文章的查看、编辑与删除页面.
"""

import logging
from datetime import datetime
from functools import lru_cache
from importlib import import_module
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from flask import Blueprint, Flask, flash, jsonify, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect

from quill.constants import FlashCategory
from quill.errors import AuthenticationError
from quill.infra.logging.request_middleware import register_request_logging
from quill.settings import Settings
from quill.utils.response_utils import prefers_json_response, unified_error_response
from quill.utils.structlog_config import ErrorContext, configure_structlog
from quill.utils.time_utils import time_utils

if TYPE_CHECKING:
    from quill.models.user import User
    from quill.repositories.users_repository import UsersRepository

# 初始化扩展
db = SQLAlchemy()
migrate = Migrate()
bcrypt = Bcrypt()
login_manager = LoginManager()
csrf = CSRFProtect()


@lru_cache(maxsize=1)
def get_users_repository() -> type["UsersRepository"]:
    """延迟加载用户 Repository,避免循环导入."""
    return import_module("quill.repositories.users_repository").UsersRepository


def create_app(*, settings: Settings | None = None) -> Flask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.

    Returns:
        Flask: Flask应用实例

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    configure_app(app, resolved_settings)

    # 配置会话安全
    configure_security(app, resolved_settings)

    # 初始化扩展
    initialize_extensions(app)

    # 注册蓝图
    configure_blueprints(app)

    # 配置日志
    configure_logging(app)
    configure_structlog(app)
    register_request_logging(app)

    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    # 注册全局错误处理器
    configure_error_handlers(app)

    # 配置模板过滤器与全局变量
    configure_template_context(app)

    # 注册命令行
    import_module("quill.cli").register_commands(app)

    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """写入 Settings 提供的配置."""
    app.config.from_mapping(settings.to_flask_config())
    app.config.setdefault("APPLICATION_ROOT", "/")


def configure_security(app: Flask, settings: Settings) -> None:
    """配置会话安全参数与 Cookie 选项."""
    app.config["PERMANENT_SESSION_LIFETIME"] = settings.session_lifetime_seconds
    app.config["SESSION_COOKIE_SECURE"] = settings.is_production
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_NAME"] = "quill_session"


def initialize_extensions(app: Flask) -> None:
    """初始化数据库、登录、CSRF 等 Flask 扩展."""
    db.init_app(app)
    migrate.init_app(app, db)

    csrf.init_app(app)
    bcrypt.init_app(app)

    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message_category = FlashCategory.INFO
    login_manager.session_protection = "basic"

    @login_manager.user_loader
    def load_user(user_id: str) -> "User | None":
        return get_users_repository().get_by_id(int(user_id))


def configure_blueprints(app: Flask) -> None:
    """注册所有蓝图以暴露路由."""
    blueprint_specs: list[tuple[str, str, str | None]] = [
        ("quill.routes.main", "main_bp", None),
        ("quill.routes.health", "health_bp", "/health"),
        ("quill.routes.auth", "auth_bp", "/auth"),
        ("quill.routes.posts", "posts_bp", "/posts"),
    ]

    for module_path, attr_name, prefix in blueprint_specs:
        module = import_module(module_path)
        blueprint: Blueprint = getattr(module, attr_name)
        if prefix:
            app.register_blueprint(blueprint, url_prefix=prefix)
        else:
            app.register_blueprint(blueprint)


def configure_logging(app: Flask) -> None:
    """非调试/测试环境下挂载滚动文件日志."""
    if app.debug or app.testing:
        return

    log_path = Path(app.config["LOG_FILE"])
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=app.config["LOG_MAX_SIZE"],
        backupCount=app.config["LOG_BACKUP_COUNT"],
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"),
    )
    file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
    logging.getLogger().addHandler(file_handler)
    app.logger.info("Quill 应用启动")


def configure_error_handlers(app: Flask) -> None:
    """注册全局错误处理器.

    未登录的页面请求跳转登录页;其余错误统一记录日志,
    JSON 请求返回统一错误载荷,页面请求渲染错误页.
    """

    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        if isinstance(error, AuthenticationError) and not prefers_json_response():
            flash(error.message, FlashCategory.WARNING)
            next_target = request.full_path.rstrip("?")
            return redirect(url_for("auth.login", next=next_target))

        payload, status_code = unified_error_response(error, context=ErrorContext(error, request))
        if prefers_json_response():
            return jsonify(payload), status_code
        return render_template("errors/error.html", error=payload, status_code=status_code), status_code


def configure_template_context(app: Flask) -> None:
    """注册模板过滤器与全局变量."""

    @app.template_filter("datetime")
    def datetime_filter(dt: datetime | None) -> str:
        return time_utils.format_datetime(dt)

    @app.context_processor
    def inject_globals() -> dict[str, object]:
        return {
            "app_name": app.config.get("APP_NAME", "Quill"),
            "flash_css_class": FlashCategory.get_css_class,
        }


from quill.models import post, user  # noqa: F401, E402

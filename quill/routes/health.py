"""Quill - 健康检查路由."""

from flask import Blueprint, current_app
from flask.typing import ResponseReturnValue
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from quill import db
from quill.constants import HttpStatus
from quill.utils.response_utils import jsonify_unified_success
from quill.utils.route_safety import log_with_context
from quill.utils.time_utils import time_utils

# 创建蓝图
health_bp = Blueprint("health", __name__)


def _check_database() -> bool:
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        db.session.rollback()
        log_with_context(
            "error",
            "数据库健康检查失败",
            module="health",
            action="check_database",
            extra={"error_message": str(exc)},
            include_actor=False,
        )
        return False
    return True


@health_bp.route("")
def health_check() -> ResponseReturnValue:
    """基础健康检查.

    Returns:
        JSON 响应,包含服务状态、数据库连通性和版本信息.
        数据库不可用时返回 503.

    """
    database_ok = _check_database()
    data = {
        "status": "healthy" if database_ok else "unhealthy",
        "database": "ok" if database_ok else "error",
        "timestamp": time_utils.now().isoformat(),
        "version": current_app.config.get("APP_VERSION"),
    }
    if database_ok:
        return jsonify_unified_success(data=data, message="服务运行正常")
    return jsonify_unified_success(data=data, message="数据库不可用", status=HttpStatus.SERVICE_UNAVAILABLE)

"""视图层的安全执行与结构化日志助手.

`safe_route_call` 包裹视图调用的业务逻辑: 业务异常记录后原样抛出,
交给全局错误处理器映射状态码;其余异常包装为 SystemError,只向客户端暴露统一文案.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, TypeVar

from flask_login import current_user
from werkzeug.exceptions import HTTPException

from quill.errors import AppError, SystemError
from quill.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from quill.types import ContextDict, LoggerExtra

R = TypeVar("R")
LogLevel = Literal["debug", "info", "warning", "error"]

_PASSTHROUGH_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def _current_actor_id() -> int | None:
    try:
        return getattr(current_user, "id", None)
    except (RuntimeError, AttributeError):
        return None


def log_with_context(
    level: LogLevel,
    event: str,
    *,
    module: str,
    action: str,
    context: ContextDict | None = None,
    extra: LoggerExtra | None = None,
    include_actor: bool = True,
) -> None:
    """记录带 module/action 字段的结构化日志.

    Args:
        level: structlog 方法名,例如 "warning".
        event: 日志事件描述.
        module: 所属模块,用于过滤.
        action: 操作名称,通常对应视图动作.
        context: 业务上下文,例如文章 slug.
        extra: 附加字段,例如异常类型.
        include_actor: 是否附带当前登录用户 ID.

    """
    payload: dict[str, object] = {"module": module, "action": action}
    if include_actor:
        actor_id = _current_actor_id()
        if actor_id is not None:
            payload["actor_id"] = actor_id
    payload.update(context or {})
    payload.update(extra or {})

    logger = get_logger("app")
    getattr(logger, level)(event, **payload)


def safe_route_call(
    func: Callable[..., R],
    *args: object,
    module: str,
    action: str,
    public_error: str,
    context: ContextDict | None = None,
) -> R:
    """执行视图逻辑并统一记录失败日志.

    Raises:
        AppError: 业务逻辑抛出的异常原样透传.
        SystemError: 其余异常,消息为 public_error.

    """
    event = f"{action}执行失败"
    try:
        return func(*args)
    except _PASSTHROUGH_EXCEPTIONS as exc:
        log_with_context(
            "warning",
            event,
            module=module,
            action=action,
            context=context,
            extra={"error_type": exc.__class__.__name__, "error_message": str(exc)},
        )
        raise
    except Exception as exc:
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context,
            extra={"error_type": exc.__class__.__name__, "unexpected": True},
        )
        raise SystemError(public_error) from exc

"""请求上下文变量.

request_id 与 user_id 在 before_request 绑定、teardown 时复位,
structlog 处理器与错误封套从这里读取.
"""

from __future__ import annotations

from contextlib import suppress
from contextvars import ContextVar, Token
from dataclasses import dataclass

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_var: ContextVar[int | None] = ContextVar("user_id", default=None)


@dataclass(frozen=True, slots=True)
class RequestContextTokens:
    """绑定时返回的 token,复位时原样交回."""

    request_id: Token[str | None]
    user_id: Token[int | None]


def bind_request_context(request_id: str, user_id: int | None) -> RequestContextTokens:
    return RequestContextTokens(
        request_id=request_id_var.set(request_id),
        user_id=user_id_var.set(user_id),
    )


def reset_request_context(tokens: RequestContextTokens | None) -> None:
    """复位到绑定前的值,同线程的下一个请求不会读到旧值."""
    if tokens is None:
        return
    # token 跨上下文复位时会抛 ValueError
    with suppress(ValueError, RuntimeError):
        request_id_var.reset(tokens.request_id)
    with suppress(ValueError, RuntimeError):
        user_id_var.reset(tokens.user_id)


__all__ = [
    "RequestContextTokens",
    "bind_request_context",
    "request_id_var",
    "reset_request_context",
    "user_id_var",
]

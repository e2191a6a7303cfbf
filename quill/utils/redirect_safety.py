"""Quill - 登录后跳转目标校验.

`/auth/login?next=...` 只允许跳回站内路径,防止开放重定向.
"""

from __future__ import annotations

from urllib.parse import urlsplit

_FORBIDDEN_CHARS = ("\r", "\n", "\\")


def is_safe_redirect_target(target: str) -> bool:
    """判断 next 参数是否为安全的站内路径.

    仅接受以单个 `/` 开头、不含 scheme/netloc 与控制字符的路径.
    """
    candidate = target.strip()
    if not candidate.startswith("/") or candidate.startswith("//"):
        return False
    if any(char in candidate for char in _FORBIDDEN_CHARS):
        return False
    parts = urlsplit(candidate)
    return not parts.scheme and not parts.netloc


def resolve_safe_redirect_target(target: str | None, *, fallback: str) -> str:
    """返回可直接交给 redirect() 的地址,不安全或为空时使用 fallback."""
    candidate = (target or "").strip()
    if candidate and is_safe_redirect_target(candidate):
        return candidate
    return fallback

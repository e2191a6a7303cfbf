"""HTTP头常量.

定义常用的HTTP头名称，避免魔法字符串。
"""


class HttpHeaders:
    """HTTP头常量."""

    # 请求头
    USER_AGENT = "User-Agent"

    # 自定义头
    X_REQUEST_ID = "X-Request-ID"
    X_REQUESTED_WITH = "X-Requested-With"

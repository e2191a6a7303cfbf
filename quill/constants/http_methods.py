"""HTTP方法常量."""


class HttpMethod:
    """HTTP方法常量."""

    GET = "GET"
    POST = "POST"

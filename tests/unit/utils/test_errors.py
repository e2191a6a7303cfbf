"""统一异常与状态码映射的单元测试."""

import pytest
from werkzeug.exceptions import NotFound

from quill.constants import HttpStatus
from quill.errors import (
    AuthenticationError,
    ConflictError,
    InvariantError,
    NotFoundError,
    invariant,
    map_exception_to_status,
)


@pytest.mark.unit
def test_invariant_returns_value_when_truthy() -> None:
    assert invariant("my-first-post", "params.slug is required") == "my-first-post"


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", False])
def test_invariant_raises_for_falsy_values(value) -> None:
    with pytest.raises(InvariantError) as exc_info:
        invariant(value, "params.slug is required")

    assert exc_info.value.message == "Invariant failed: params.slug is required"
    assert exc_info.value.status_code == HttpStatus.INTERNAL_SERVER_ERROR


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NotFoundError("Post not found: x"), HttpStatus.NOT_FOUND),
        (ConflictError("Slug already exists: x"), HttpStatus.CONFLICT),
        (AuthenticationError(), HttpStatus.UNAUTHORIZED),
        (InvariantError("broken"), HttpStatus.INTERNAL_SERVER_ERROR),
        (NotFound(), HttpStatus.NOT_FOUND),
        (RuntimeError("boom"), HttpStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_map_exception_to_status(error, expected) -> None:
    assert map_exception_to_status(error) == expected


@pytest.mark.unit
def test_authentication_error_uses_default_message() -> None:
    error = AuthenticationError()

    assert error.message == "请先登录"
    assert error.recoverable is True

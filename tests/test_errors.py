import pytest

from guardedchat.errors import (
    AlreadyExistsError,
    BannedError,
    ChatError,
    NotAuthorizedError,
    NotFoundError,
    RpcStatusError,
    StatusCode,
)


@pytest.mark.parametrize(
    "error_class",
    [NotAuthorizedError, NotFoundError, AlreadyExistsError, BannedError],
)
def test_domain_errors_share_a_base(error_class):
    error = error_class("boom")
    assert isinstance(error, ChatError)
    assert str(error) == "boom"


def test_domain_errors_are_distinct():
    not_found = NotFoundError("not found")
    already = AlreadyExistsError("already exists")
    assert str(not_found) == "not found"
    assert not isinstance(not_found, BannedError)
    assert not isinstance(already, NotFoundError)
    assert not issubclass(NotFoundError, BannedError)
    assert not issubclass(AlreadyExistsError, NotFoundError)


def test_rpc_status_error_keeps_code_and_message():
    error = RpcStatusError(StatusCode.PERMISSION_DENIED, "only admins can ban users")
    assert error.code is StatusCode.PERMISSION_DENIED
    assert error.message == "only admins can ban users"
    assert str(error) == "only admins can ban users"


def test_rpc_status_error_accepts_integer_code():
    error = RpcStatusError(StatusCode.NOT_FOUND.value, "user not found")
    assert error.code is StatusCode.NOT_FOUND
    assert "NOT_FOUND" in repr(error)


def test_status_codes_fixed_by_protocol():
    assert StatusCode(0) is StatusCode.OK
    assert StatusCode(16) is StatusCode.UNAUTHENTICATED
    assert RpcStatusError(7, "denied").code is StatusCode.PERMISSION_DENIED
    assert len(StatusCode) == 17
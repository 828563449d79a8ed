"""Basic unit tests for the funpay-chat package."""

from funpay_chat import (
    AsyncFunPay,
    CommandDispatcher,
    FunPayError,
    AuthError,
    NetworkError,
    FetchError,
    NotAuthenticated,
    ConfigError,
    PollResult,
    __version__,
)
from funpay_chat.models.message import FAILED, FOUND, NO_UPDATE, Message


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert AsyncFunPay is not None
    assert CommandDispatcher is not None


def test_error_hierarchy():
    assert issubclass(AuthError, FunPayError)
    assert issubclass(NetworkError, FunPayError)
    assert issubclass(NotAuthenticated, FunPayError)
    assert issubclass(ConfigError, FunPayError)
    assert FetchError is NetworkError


def test_error_attributes():
    err = FunPayError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    net = NetworkError("HTTP 502", status_code=502)
    assert net.code == "network_error"
    assert net.status_code == 502
    assert net.details == {"status_code": 502}

    assert NotAuthenticated().code == "not_authenticated"
    assert AuthError("no token").code == "auth_error"


def test_poll_result_variants():
    assert PollResult.no_update().status == NO_UPDATE
    msg = Message(id="m1", author="alice", text="hi", chat_id="c1")
    found = PollResult.found(msg)
    assert found.status == FOUND
    assert found.message is msg
    err = NetworkError("down")
    failed = PollResult.failed(err)
    assert failed.status == FAILED
    assert failed.error is err
    assert failed.message is None

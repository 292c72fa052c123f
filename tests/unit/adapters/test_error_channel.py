"""Unit tests for the raising error channel."""

import pytest

from enlist.adapters.error_channel import RaisingErrorChannel
from enlist.domain.codes import AppCode, HTTPStatus
from enlist.domain.errors import CodedError


def test_raise_error_raises_coded_error():
    """raise_error raises a CodedError carrying the given fields."""
    channel = RaisingErrorChannel()

    with pytest.raises(CodedError) as excinfo:
        channel.raise_error(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            AppCode.REGISTER_USER_FAILED,
            "failed to register user",
        )

    assert excinfo.value.http_status is HTTPStatus.INTERNAL_SERVER_ERROR
    assert excinfo.value.app_code is AppCode.REGISTER_USER_FAILED
    assert excinfo.value.message == "failed to register user"


def test_raise_error_does_not_log(caplog):
    """Signalling a failure writes no log records."""
    with caplog.at_level("DEBUG"):
        with pytest.raises(CodedError):
            RaisingErrorChannel().raise_error(
                HTTPStatus.BAD_REQUEST, AppCode.SUBSCRIBE_USER_FAILED, "nope"
            )
    assert caplog.records == []

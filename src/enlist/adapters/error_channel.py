"""Error channel that raises coded errors."""

from typing import NoReturn

from enlist.domain.codes import AppCode, HTTPStatus
from enlist.domain.errors import raise_coded_error
from enlist.interfaces.error_channel import ErrorChannel

# pylint: disable=too-few-public-methods


class RaisingErrorChannel(ErrorChannel):
    """Signal failures by raising `CodedError`."""

    def raise_error(
        self, http_status: HTTPStatus, app_code: AppCode, message: str
    ) -> NoReturn:
        raise_coded_error(http_status, app_code, message)

"""Interface for the uniform failure-signaling entry point."""

import abc
from typing import NoReturn

from enlist.domain.codes import AppCode, HTTPStatus

# pylint: disable=too-few-public-methods


class ErrorChannel(abc.ABC):
    """Contract for signaling a coded failure."""

    @abc.abstractmethod
    def raise_error(
        self, http_status: HTTPStatus, app_code: AppCode, message: str
    ) -> NoReturn:
        """Signal a failure as a `CodedError`.

        Args:
            http_status: Transport-level status of the failure.
            app_code: Application code of the failure.
            message: Human-readable message.

        Raises:
            CodedError: Implementations raise a `CodedError` built from the arguments.
        """

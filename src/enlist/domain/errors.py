"""Domain-layer error definitions."""

from __future__ import annotations

from typing import NoReturn

from .codes import AppCode, HTTPStatus

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                               Coded errors
# ============================================================================


class CodedError(DomainError):
    """Failure carrying a transport status, an application code and a message.

    Instances compare equal when all three fields match, so tests can assert
    on a raised error as a value.

    Args:
        http_status: Transport-level status (e.g. ``HTTPStatus.INTERNAL_SERVER_ERROR``).
        app_code: Application-specific code (e.g. ``AppCode.REGISTER_USER_FAILED``).
        message: Human-readable message; also the exception's ``str()``.
    """

    def __init__(self, http_status: HTTPStatus, app_code: AppCode, message: str) -> None:
        super().__init__(message)
        self._http_status = HTTPStatus(http_status)
        self._app_code = AppCode(app_code)
        self._message = message

    @property
    def http_status(self) -> HTTPStatus:
        """The transport-level status of the failure."""
        return self._http_status

    @property
    def app_code(self) -> AppCode:
        """The application code of the failure."""
        return self._app_code

    @property
    def message(self) -> str:
        """The human-readable failure message."""
        return self._message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodedError):
            return NotImplemented
        return (self.http_status, self.app_code, self.message) == (
            other.http_status,
            other.app_code,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.http_status, self.app_code, self.message))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(http_status={self.http_status.value}, "
            f"app_code={self.app_code.value}, message={self.message!r})"
        )


def raise_coded_error(
    http_status: HTTPStatus, app_code: AppCode, message: str
) -> NoReturn:
    """Construct a `CodedError` and raise it.

    This only signals the failure; logging is left to the caller.

    Raises:
        CodedError: Always.
    """
    raise CodedError(http_status, app_code, message)

"""User registration workflow.

Creates a user through the repository, subscribes them to the newsletter and
reports the result through the structured logger. Every failure, whichever
collaborator caused it, collapses into the same coded error signal and the
same failure response; callers never see a raw upstream error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from enlist.domain.codes import AppCode, HTTPStatus
from enlist.domain.errors import CodedError
from enlist.domain.model import RegistrationRequest, RegistrationResult
from enlist.interfaces.outcome import Failure, Ok

if TYPE_CHECKING:
    from enlist.interfaces.app_logger import AppLogger
    from enlist.interfaces.error_channel import ErrorChannel
    from enlist.interfaces.newsletter import NewsletterService
    from enlist.interfaces.user_repository import UserRepository

logger = logging.getLogger(__name__)

SCOPE = "RegistrationWorkflow register"
FAILURE_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR
FAILURE_CODE = AppCode.REGISTER_USER_FAILED


class RegistrationWorkflow:
    """Register users by composing a repository and a newsletter service.

    Args:
        repository: Creates the user record.
        newsletter: Subscribes the created user.
        app_logger: Receives the coded success/failure events.
        errors: Signals the coded failure; its `CodedError` is caught here.

    Note:
        Steps run strictly in sequence and the first failure short-circuits the
        rest. There are no retries and no deduplication.
    """

    def __init__(
        self,
        repository: UserRepository,
        newsletter: NewsletterService,
        *,
        app_logger: AppLogger,
        errors: ErrorChannel,
    ) -> None:
        self.repository = repository
        self.newsletter = newsletter
        self.app_logger = app_logger
        self.errors = errors

    async def register_request(
        self, request: RegistrationRequest
    ) -> RegistrationResult:
        """Register the user described by `request`."""
        return await self.register(request.name, request.email)

    async def register(self, name: str, email: str) -> RegistrationResult:
        """Register a user and subscribe them to the newsletter.

        Args:
            name: Display name, passed through to the repository unvalidated.
            email: Email address, passed through to the repository unvalidated.

        Returns:
            RegistrationResult: `succeeded()` when both steps succeed and the
            success event is recorded, otherwise `failed()`.
        """
        try:
            failure = await self._attempt(name, email)
        except Exception as exc:  # pylint: disable=broad-except
            logger.debug("Registration failed: %s", exc, exc_info=True)
            return self._fail()

        if failure is not None:
            logger.debug("Registration failed: %s", failure)
            return self._fail()
        return RegistrationResult.succeeded()

    async def _attempt(self, name: str, email: str) -> str | None:
        """Run the steps in order; return why the first refusal happened, or None."""
        match await self.repository.create_user(name, email):
            case Ok(value=user):
                pass
            case Failure(reason=reason):
                return f"create_user failed: {reason}"
            case other:
                raise TypeError(f"Unexpected outcome from create_user: {other!r}")

        match await self.newsletter.subscribe_user(user):
            case Ok():
                pass
            case Failure(reason=reason):
                logger.debug(
                    "Subscription refused for user %s [%s]: %s",
                    user.id,
                    AppCode.SUBSCRIBE_USER_FAILED.value,
                    reason,
                )
                return f"subscribe_user failed: {reason}"
            case other:
                raise TypeError(f"Unexpected outcome from subscribe_user: {other!r}")

        self.app_logger.info(
            SCOPE, AppCode.REGISTER_USER_SUCCESS, {"user": user.as_dict()}
        )
        return None

    def _fail(self) -> RegistrationResult:
        """Signal the coded error once, record it, and build the failure response.

        A channel that raises anything but `CodedError`, or an error sink that
        raises, is logged here and the failure response is still returned.
        """
        message = RegistrationResult.FAILURE_MSG
        error = CodedError(FAILURE_STATUS, FAILURE_CODE, message)
        try:
            self.errors.raise_error(FAILURE_STATUS, FAILURE_CODE, message)
        except CodedError as raised:
            error = raised
        except Exception:  # pylint: disable=broad-except
            logger.exception("Error channel failed to signal %s", FAILURE_CODE.value)

        try:
            self.app_logger.error(
                SCOPE,
                error.app_code,
                {"status": int(error.http_status), "message": error.message},
            )
        except Exception:  # pylint: disable=broad-except
            logger.exception("App logger failed to record %s", error.app_code.value)
        return RegistrationResult.failed()

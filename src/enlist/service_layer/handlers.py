"""Service layer handlers."""

import logging
from collections.abc import Awaitable, Callable

from enlist.domain.model import RegistrationRequest, RegistrationResult

from . import commands
from .registration import RegistrationWorkflow

logger = logging.getLogger(__name__)

# ============================================================================
#                       User Registration Handlers
# ============================================================================


async def register_user(
    cmd: commands.RegisterUser, workflow: RegistrationWorkflow
) -> RegistrationResult:
    """Register a user through the injected workflow."""

    request = RegistrationRequest(name=cmd.name, email=cmd.email)
    result = await workflow.register_request(request)
    logger.debug("RegisterUser: %s", result.msg)
    return result


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., Awaitable[object]]] = {
    commands.RegisterUser: register_user,
}

"""Bootstrap the message bus with handlers and the registration workflow."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from enlist import config
from enlist.adapters.app_logger import LoggingAppLogger
from enlist.adapters.error_channel import RaisingErrorChannel
from enlist.adapters.id_generators import SequentialIdGenerator
from enlist.adapters.newsletter import InMemoryNewsletterService
from enlist.adapters.redactor import ContextRedactor
from enlist.adapters.user_repository import InMemoryUserRepository
from enlist.interfaces.redactor import RedactorMode
from enlist.service_layer.handlers import COMMAND_HANDLERS
from enlist.service_layer.messagebus import MessageBus
from enlist.service_layer.registration import RegistrationWorkflow

if TYPE_CHECKING:
    from enlist.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    workflow: RegistrationWorkflow


def build_workflow(
    *,
    default_role: str = config.DEFAULT_ROLE,
    newsletter_available: bool = True,
    redactor_mode: RedactorMode = RedactorMode.LENIENT,
) -> RegistrationWorkflow:
    """Build a registration workflow over the in-memory adapters."""
    repository = InMemoryUserRepository(
        SequentialIdGenerator(), default_role=default_role
    )
    newsletter = InMemoryNewsletterService(available=newsletter_available)
    app_logger = LoggingAppLogger(redactor=ContextRedactor(redactor_mode))
    return RegistrationWorkflow(
        repository,
        newsletter,
        app_logger=app_logger,
        errors=RaisingErrorChannel(),
    )


def build_message_bus(
    workflow: RegistrationWorkflow,
    command_handlers: dict[type[Command], Callable[..., object]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"workflow": workflow}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(
    redactor_mode: RedactorMode | None = None,
    newsletter_available: bool | None = None,
) -> AppContainer:
    """Bootstrap the message bus with handlers and the registration workflow.

    Arguments left as None fall back to the environment (see `enlist.config`).
    """
    workflow = build_workflow(
        default_role=config.get_default_role(),
        newsletter_available=(
            config.get_newsletter_available()
            if newsletter_available is None
            else newsletter_available
        ),
        redactor_mode=redactor_mode or config.get_redactor_mode(),
    )
    message_bus = build_message_bus(workflow, COMMAND_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
        workflow=workflow,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)

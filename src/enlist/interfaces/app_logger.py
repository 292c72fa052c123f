"""Structured application logger interface."""

import abc
from collections.abc import Mapping

from enlist.domain.codes import AppCode


class AppLogger(abc.ABC):
    """Fire-and-forget sink for coded success/failure events.

    Each event carries a scope (where it happened), an application code and a
    context payload. Return values are never consumed.
    """

    @abc.abstractmethod
    def info(self, scope: str, app_code: AppCode, context: Mapping[str, object]) -> None:
        """Record a successful event."""

    @abc.abstractmethod
    def error(
        self, scope: str, app_code: AppCode, context: Mapping[str, object]
    ) -> None:
        """Record a failed event."""

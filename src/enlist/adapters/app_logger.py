"""AppLogger backed by the standard library logging module.

Events are emitted on the ``enlist.events`` logger so they flow through the
same console and flight-recorder handlers as every other log record. The
application code, scope and (redacted) context are also attached to each
record as ``extra`` attributes for handlers that want structured fields.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from enlist.domain.codes import AppCode
from enlist.interfaces.app_logger import AppLogger
from enlist.interfaces.redactor import Redactor

from .redactor import ContextRedactor

EVENTS_LOGGER_NAME = "enlist.events"


class LoggingAppLogger(AppLogger):
    """Write coded events to a stdlib logger.

    Args:
        logger: Target logger. Defaults to ``logging.getLogger("enlist.events")``.
        redactor: Sanitizes context payloads before they are logged. Defaults
            to a lenient `ContextRedactor`.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        redactor: Redactor | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(EVENTS_LOGGER_NAME)
        self._redactor = redactor or ContextRedactor()

    @property
    def redactor(self) -> Redactor:
        return self._redactor

    def info(self, scope: str, app_code: AppCode, context: Mapping[str, object]) -> None:
        self._log(logging.INFO, scope, app_code, context)

    def error(
        self, scope: str, app_code: AppCode, context: Mapping[str, object]
    ) -> None:
        self._log(logging.ERROR, scope, app_code, context)

    def _log(
        self, level: int, scope: str, app_code: AppCode, context: Mapping[str, object]
    ) -> None:
        safe_context = self._redactor.sanitize_context(context)
        self._logger.log(
            level,
            "%s [%s] %s",
            scope,
            app_code.value,
            safe_context,
            extra={"scope": scope, "app_code": app_code.value, "context": safe_context},
        )

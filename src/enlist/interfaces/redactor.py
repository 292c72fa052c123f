"""Interfaces for redacting sensitive values.

This module defines the Redactor interface and the RedactorMode enumeration
used by adapters to sanitize log context payloads before they reach a log
handler. Implementations should provide sanitize_context that returns a
display-safe copy of the payload.
"""

import abc
from collections.abc import Mapping
from enum import Enum

# pylint: disable=too-few-public-methods


class RedactorMode(Enum):
    """Enumeration for redactor modes.

    Modes:
    - LENIENT: redact passwords/tokens but keep names and emails visible.
    - STRICT: redact passwords/tokens and also names and emails.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class Redactor(abc.ABC):
    """Interface for sanitizing sensitive information from log context."""

    _mode: RedactorMode

    @abc.abstractmethod
    def sanitize_context(self, context: Mapping[str, object]) -> dict[str, object]:
        """Return a display-safe copy of a log context payload.

        Args:
            context: Raw context mapping (may be nested).

        Returns:
            A new mapping with sensitive values replaced by a placeholder.
        """

    @property
    def mode(self) -> RedactorMode:
        """Return the redaction mode."""
        return self._mode

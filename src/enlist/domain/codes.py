"""Application codes attached to log events and coded errors.

Transport-level statuses use the standard library's `http.HTTPStatus`; this
module re-exports it so callers have one import site for both code families.
"""

from enum import Enum
from http import HTTPStatus

__all__ = ["AppCode", "HTTPStatus"]


class AppCode(Enum):
    """Enumeration of application-specific codes."""

    REGISTER_USER_SUCCESS = "REGISTER_USER_SUCCESS"
    REGISTER_USER_FAILED = "REGISTER_USER_FAILED"
    SUBSCRIBE_USER_FAILED = "SUBSCRIBE_USER_FAILED"

    def __str__(self) -> str:
        return self.value

"""Interface for ID generators used by user repositories."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Hands out integer user IDs.

    Every call on one instance returns a value never returned before by that
    instance; values are positive but need not be contiguous.
    """

    @abc.abstractmethod
    def new_id(self) -> int:
        """Return the next unused ID."""

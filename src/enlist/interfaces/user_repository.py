"""User repository interface definitions."""

import abc

from enlist.domain.model import User

from .outcome import Outcome

# pylint: disable=too-few-public-methods


class UserRepository(abc.ABC):
    """Contract for a store that creates user records."""

    @abc.abstractmethod
    async def create_user(self, name: str, email: str) -> Outcome[User]:
        """Create a user record.

        Args:
            name: Display name of the user. Implementations reject an empty name.
            email: Email address of the user.

        Returns:
            Outcome[User]: `Ok` with the created user, or `Failure` with the
            reason the input was rejected.
        """

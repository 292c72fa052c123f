"""Newsletter service interface definitions."""

import abc
from dataclasses import dataclass

from enlist.domain.model import User

from .outcome import Outcome

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class Subscription:
    """Receipt of a newsletter subscription."""

    user_id: int
    email: str


class NewsletterService(abc.ABC):
    """Contract for a service that subscribes users to the newsletter."""

    @abc.abstractmethod
    async def subscribe_user(self, user: User) -> Outcome[Subscription]:
        """Subscribe a created user.

        Args:
            user: The user to subscribe.

        Returns:
            Outcome[Subscription]: `Ok` with the subscription receipt, or
            `Failure` with the reason the subscription was refused.
        """

"""In memory newsletter service implementation."""

from enlist.domain.model import User
from enlist.interfaces.newsletter import NewsletterService, Subscription
from enlist.interfaces.outcome import Failure, Ok, Outcome

SERVICE_UNAVAILABLE = "Newsletter service unavailable"
ALREADY_SUBSCRIBED = "User already subscribed"


class InMemoryNewsletterService(NewsletterService):
    """In-memory NewsletterService that records subscriptions.

    Availability can be toggled to exercise the failure path without
    patching anything.
    """

    def __init__(self, available: bool = True) -> None:
        self._available = available
        self._subscriptions: list[Subscription] = []

    def set_available(self, value: bool) -> None:
        """Switch the service between available and unavailable."""
        self._available = value

    @property
    def available(self) -> bool:
        return self._available

    @property
    def subscriptions(self) -> list[Subscription]:
        """Subscriptions recorded so far, oldest first."""
        return list(self._subscriptions)

    async def subscribe_user(self, user: User) -> Outcome[Subscription]:
        if not self._available:
            return Failure(SERVICE_UNAVAILABLE)
        if any(sub.user_id == user.id for sub in self._subscriptions):
            return Failure(ALREADY_SUBSCRIBED)

        subscription = Subscription(user_id=user.id, email=user.email)
        self._subscriptions.append(subscription)
        return Ok(subscription)

"""In memory user repository implementation.

All users are stored in memory and lost when the instance is discarded.
Use for unit tests, prototyping, or scenarios where durability is not required.
"""

from enlist.domain.model import User
from enlist.interfaces.id_generator import IdGenerator
from enlist.interfaces.outcome import Failure, Ok, Outcome
from enlist.interfaces.user_repository import UserRepository

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_TAKEN = "Email already registered"


class InMemoryUserRepository(UserRepository):
    """In-memory UserRepository for testing and non-durable use cases.

    - Rejects blank names and emails, and emails already registered
      (compared case-insensitively).
    - Never awaits between validating and storing, so interleaved
      coroutines on one event loop cannot register the same email twice.
    """

    def __init__(self, id_generator: IdGenerator, default_role: str = "user") -> None:
        self._id_generator = id_generator
        self._default_role = default_role
        self._users: dict[int, User] = {}

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    async def create_user(self, name: str, email: str) -> Outcome[User]:
        if not name or not name.strip():
            return Failure(NAME_REQUIRED)
        if not email or not email.strip():
            return Failure(EMAIL_REQUIRED)
        if self._find_by_email(email) is not None:
            return Failure(EMAIL_TAKEN)

        user = User(
            id=self._id_generator.new_id(),
            name=name,
            email=email,
            role=self._default_role,
        )
        self._users[user.id] = user
        return Ok(user)

    # --------------------------------------------------------------------- #
    # Convenience
    # --------------------------------------------------------------------- #

    def get(self, user_id: int) -> User | None:
        """Return the stored user with `user_id`, or None."""
        return self._users.get(user_id)

    @property
    def users(self) -> list[User]:
        """All stored users in creation order."""
        return list(self._users.values())

    def _find_by_email(self, email: str) -> User | None:
        wanted = email.strip().casefold()
        for user in self._users.values():
            if user.email.strip().casefold() == wanted:
                return user
        return None

"""Value objects for the registration use case."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar


@dataclass(frozen=True)
class RegistrationRequest:
    """Caller-supplied input for a single registration."""

    name: str
    email: str


@dataclass(frozen=True)
class User:
    """A user record as created by a user repository."""

    id: int
    name: str
    email: str
    role: str

    def as_dict(self) -> dict[str, object]:
        """Return the user as a plain mapping (e.g. for log context)."""
        return asdict(self)


@dataclass(frozen=True)
class RegistrationResult:
    """The only value returned to callers of the registration workflow.

    Success and failure share this shape; the message is the sole payload.
    """

    SUCCESS_MSG: ClassVar[str] = "user registered successfully"
    FAILURE_MSG: ClassVar[str] = "failed to register user"

    msg: str

    @classmethod
    def succeeded(cls) -> RegistrationResult:
        """Build the success response."""
        return cls(cls.SUCCESS_MSG)

    @classmethod
    def failed(cls) -> RegistrationResult:
        """Build the failure response."""
        return cls(cls.FAILURE_MSG)

    @property
    def ok(self) -> bool:
        """True when this is the success response."""
        return self.msg == self.SUCCESS_MSG

    def as_dict(self) -> dict[str, str]:
        return {"msg": self.msg}

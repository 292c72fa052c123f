"""Tagged outcomes returned by collaborators.

Collaborators report *expected* failures (bad input, refused subscription)
as a `Failure` value instead of raising, so callers can branch on the tag:

    match await repository.create_user(name, email):
        case Ok(value=user):
            ...
        case Failure(reason=reason):
            ...

Unexpected faults are still raised as exceptions.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome wrapping a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome carrying a human-readable reason."""

    reason: str


type Outcome[T] = Ok[T] | Failure

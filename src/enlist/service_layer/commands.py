"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RegisterUser(Command):
    """Command to register a user and subscribe them to the newsletter."""

    name: str
    email: str

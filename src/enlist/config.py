"""Configuration utilities for ENLIST.

This module centralizes small helpers and constants related to application
configuration. All settings are read from the environment on each call.
"""

import os

from enlist.interfaces.redactor import RedactorMode

DEFAULT_ROLE_ENV = "ENLIST_DEFAULT_ROLE"  # pragma: no mutate
NEWSLETTER_ENABLED_ENV = "ENLIST_NEWSLETTER_ENABLED"  # pragma: no mutate
REDACTOR_MODE_ENV = "ENLIST_REDACTOR_MODE"  # pragma: no mutate

DEFAULT_ROLE = "user"
TRUTHY = frozenset({"1", "true", "yes", "on"})
FALSY = frozenset({"0", "false", "no", "off"})


class ConfigError(Exception):
    """Raised when an ENLIST environment variable holds an invalid value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid; expected {expected}.")
        self.name = name
        self.value = value


def get_default_role() -> str:
    """Get the role assigned to newly created users.

    Returns:
        The value of `ENLIST_DEFAULT_ROLE`, or ``"user"`` when unset.

    Raises:
        ConfigError: If `ENLIST_DEFAULT_ROLE` is set but blank.
    """
    if (role := os.environ.get(DEFAULT_ROLE_ENV)) is None:
        return DEFAULT_ROLE
    if not role.strip():
        raise ConfigError(DEFAULT_ROLE_ENV, role, "a non-empty role name")
    return role.strip()


def get_newsletter_available() -> bool:
    """Get whether the newsletter service accepts subscriptions.

    Returns:
        The boolean value of `ENLIST_NEWSLETTER_ENABLED`; True when unset.

    Raises:
        ConfigError: If the value is not a recognised boolean string.
    """
    if not (raw := os.environ.get(NEWSLETTER_ENABLED_ENV)):
        return True
    value = raw.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise ConfigError(NEWSLETTER_ENABLED_ENV, raw, "one of true/false, yes/no, 1/0")


def get_redactor_mode() -> RedactorMode:
    """Get the redaction mode applied to logged context payloads.

    Raises:
        ConfigError: If the value is neither ``lenient`` nor ``strict``.
    """
    raw = os.environ.get(REDACTOR_MODE_ENV) or RedactorMode.LENIENT.value
    try:
        return RedactorMode(raw.strip().lower())
    except ValueError as e:
        raise ConfigError(REDACTOR_MODE_ENV, raw, "'lenient' or 'strict'") from e

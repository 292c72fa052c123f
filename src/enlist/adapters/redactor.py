"""Regex-based redactor for sanitizing log context payloads.

This module provides a Redactor implementation that masks sensitive values
(passwords, tokens, API keys, etc.) found under secret-looking keys of a
context mapping, and in free-form "key: value" or "Bearer ..." fragments of
string values. It supports lenient and strict modes (strict also redacts
names and email addresses).
"""

import re
from collections.abc import Mapping

from enlist.interfaces import redactor
from enlist.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
SECRET_KEYWORDS = [
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "access_token",
    "refresh_token",
    "id_token",
    "authorization",
    "sig",
    "signature",
]
STRICT_MODE_ADDITIONAL_KEYWORDS = ["name", "email", "username", "uid"]
STRICT_MODE_SECRET_KEYWORDS = SECRET_KEYWORDS + STRICT_MODE_ADDITIONAL_KEYWORDS
SECRET_KEYWORDS_PATTERN = "|".join(kw.replace("_", "[-_]?") for kw in (SECRET_KEYWORDS))
STRICT_MODE_SECRET_KEYWORDS_PATTERN = "|".join(
    kw.replace("_", "[-_]?") for kw in (STRICT_MODE_SECRET_KEYWORDS)
)
KEY_VALUE_SECRET_PATTERN = re.compile(
    rf"(\b(?:{SECRET_KEYWORDS_PATTERN})\s*:\s*)\S+", re.IGNORECASE
)
STRICT_MODE_KEY_VALUE_SECRET_PATTERN = re.compile(
    rf"(\b(?:{STRICT_MODE_SECRET_KEYWORDS_PATTERN})\s*:\s*)\S+", re.IGNORECASE
)
BEARER_PATTERN = re.compile(r"Bearer\s[0-9a-zA-Z\.]*", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def _normalize_key(key: object) -> str:
    return str(key).strip().lower().replace("-", "_")


class ContextRedactor(redactor.Redactor):
    """Redactor implementation using key matching and regex-based sanitization."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode
        keywords = (
            STRICT_MODE_SECRET_KEYWORDS
            if self._mode == RedactorMode.STRICT
            else SECRET_KEYWORDS
        )
        self._secret_keys = frozenset(keywords)

    def sanitize_context(self, context: Mapping[str, object]) -> dict[str, object]:
        return {
            key: (
                PLACEHOLDER
                if _normalize_key(key) in self._secret_keys
                else self._sanitize_value(value)
            )
            for key, value in context.items()
        }

    def _sanitize_value(self, value: object) -> object:
        if isinstance(value, Mapping):
            return self.sanitize_context(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._sanitize_value(item) for item in value)
        if isinstance(value, str):
            return self._sanitize_text(value)
        return value

    def _sanitize_text(self, text: str) -> str:
        sanitized = text

        # 1) Bearer tokens: Bearer <token>
        sanitized = BEARER_PATTERN.sub(PLACEHOLDER, sanitized)

        # 2) Key:Value secrets embedded in free-form text
        key_value_pattern = (
            STRICT_MODE_KEY_VALUE_SECRET_PATTERN
            if self._mode == RedactorMode.STRICT
            else KEY_VALUE_SECRET_PATTERN
        )
        sanitized = key_value_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

        # 3) Strict: bare email addresses
        if self._mode == RedactorMode.STRICT:
            sanitized = EMAIL_PATTERN.sub(PLACEHOLDER, sanitized)

        return sanitized

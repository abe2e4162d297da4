"""Customer input sanitizing and field validation.

The pattern table is built once at import and exposed read-only; nothing
mutates it at runtime.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType(
    {
        "fullName": re.compile(r"[a-zA-Z\s]{2,50}", re.ASCII),
        "idNumber": re.compile(r"\d{13}", re.ASCII),
        "username": re.compile(r"[a-zA-Z0-9_]{3,20}", re.ASCII),
        "accountNumber": re.compile(r"\d{10,12}", re.ASCII),
        # Deliberately weak: development/test policy
        "password": re.compile(r".{4,}"),
    }
)

MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "fullName": "Full name must be 2-50 characters, letters and spaces only",
        "idNumber": "ID number must be exactly 13 digits",
        "username": "Username must be 3-20 characters, alphanumeric and underscore only",
        "accountNumber": "Account number must be 10-12 digits",
        "password": "Password must be at least 4 characters long",
    }
)


def sanitize(value: Any) -> str:
    """Trim a free-form field and strip angle brackets.

    Non-string input yields an empty string.
    """
    if not isinstance(value, str):
        return ""
    return value.strip().replace("<", "").replace(">", "")


def is_valid(field: str, value: Any) -> bool:
    """Check a value against the pattern registered for ``field``.

    Empty and non-string values are never valid.
    """
    if not value or not isinstance(value, str):
        return False
    return PATTERNS[field].fullmatch(value) is not None


def validate_signup(fields: Mapping[str, Any]) -> list[str]:
    """Validate every signup field and collect all failures.

    Args:
        fields: Sanitized values keyed by wire name (``fullName``, ``idNumber``,
            ``username``, ``accountNumber``) plus the raw ``password``.

    Returns:
        One message per failing field, in pattern-table order; empty if valid.
    """
    return [MESSAGES[field] for field in PATTERNS if not is_valid(field, fields.get(field))]

"""Customer accounts: signup, login and existence checks."""

from .entities import Customer


__all__ = ["Customer"]

"""Shared enumeration module.

This module contains enumeration classes used across the application.
"""

from enum import StrEnum


class Environment(StrEnum):
    """Application environment enumeration.

    Defines the allowed runtime environments for the application.
    Used to control environment-specific behavior like debug mode.

    If an invalid or missing value is provided, defaults to DEVELOPMENT.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def _missing_(cls, value: object) -> "Environment":
        """Return default environment when value is invalid or missing.

        Args:
            value: The invalid value that was provided.

        Returns:
            DEVELOPMENT as the default environment.
        """
        return cls.DEVELOPMENT


class PrincipalType(StrEnum):
    """Token audience discriminator.

    Every issued session token carries exactly one of these values in its
    ``type`` claim, so customer and employee sessions are never confused.

    Attributes:
        CUSTOMER: Bank customer using the portal.
        EMPLOYEE: Bank employee using the back-office portal.
    """

    CUSTOMER = "customer"
    EMPLOYEE = "employee"

    @classmethod
    def values(cls) -> list[str]:
        """Get list of all principal type values.

        Example:
            PrincipalType.values()  # ["customer", "employee"]
        """
        return [p.value for p in cls]

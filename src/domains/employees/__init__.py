"""Employee accounts: login and operator provisioning."""

from .entities import Employee


__all__ = ["Employee"]

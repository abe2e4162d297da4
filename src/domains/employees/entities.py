"""Employee domain entities."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from src.abstract import Entity
from src.abstract import TimeStampMixin


class Employee(TimeStampMixin, Entity):
    """Bank employee account.

    Attributes:
        pk: UUID primary key.
        employee_id: Unique staff identifier used to log in.
        password_hash: Salted password hash.
        full_name: Display name.
        role: Job role, embedded in issued tokens.
        department: Organisational unit.
        created_at: Timestamp when the account was provisioned.
    """

    employee_id: Mapped[str] = mapped_column(String(50), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    full_name: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(50))
    department: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"Employee(pk={self.pk!r}, employee_id={self.employee_id!r})"

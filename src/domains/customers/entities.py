"""Customer domain entities."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from src.abstract import Entity
from src.abstract import TimeStampMixin


class Customer(TimeStampMixin, Entity):
    """Bank customer account.

    Username, national ID and account number are each unique; the database
    enforces this with unique constraints in addition to the pre-insert check
    done by ``CustomerRepository``. Usernames are stored lowercased, which
    makes their uniqueness case-insensitive.

    Attributes:
        pk: UUID primary key.
        full_name: Letters and spaces, 2-50 characters.
        national_id: Exactly 13 digits (``idNumber`` on the wire).
        username: 3-20 characters, alphanumeric and underscore, lowercase.
        account_number: 10-12 digits.
        password_hash: Salted password hash; plaintext is never stored.
        created_at: Timestamp when the account was created.
    """

    full_name: Mapped[str] = mapped_column(String(50))
    national_id: Mapped[str] = mapped_column(String(13), unique=True)
    username: Mapped[str] = mapped_column(String(20), unique=True)
    account_number: Mapped[str] = mapped_column(String(12), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"Customer(pk={self.pk!r}, username={self.username!r})"

"""Customer data access."""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from src.abstract import Repository
from src.core.security import hash_password
from src.exceptions import ConflictException

from .entities import Customer


logger = logging.getLogger(__name__)

DUPLICATE_CUSTOMER_MESSAGE = "User with this username, ID number, or account number already exists"


class CustomerRepository(Repository[Customer]):
    """Lookup and creation of customer accounts."""

    async def find_customer_by(
        self,
        *,
        username: str | None = None,
        account_number: str | None = None,
        national_id: str | None = None,
    ) -> Customer | None:
        """Find a customer matching every supplied identifier.

        Supplied identifiers are ANDed: passing both a username and an
        account number only matches a record holding both. Usernames are
        compared lowercased.

        Returns:
            The matching customer, or None when nothing matches or no
            identifier was supplied.
        """
        filters = []
        if username:
            filters.append(Customer.username == username.lower())
        if account_number:
            filters.append(Customer.account_number == account_number)
        if national_id:
            filters.append(Customer.national_id == national_id)

        if not filters:
            return None

        return await self.select_one(*filters)

    async def create_customer(
        self,
        *,
        full_name: str,
        national_id: str,
        username: str,
        account_number: str,
        password: str,
    ) -> Customer:
        """Create a customer, hashing the password before it is persisted.

        Uniqueness is checked up front to give a descriptive error, and the
        unique constraints catch whatever slips between check and insert.

        Raises:
            ConflictException: If username, national ID or account number is taken.
        """
        username = username.lower()

        taken = await self.exists(
            or_(
                Customer.username == username,
                Customer.national_id == national_id,
                Customer.account_number == account_number,
            )
        )
        if taken:
            logger.info("Signup rejected: duplicate identity for username %s", username)
            raise ConflictException(DUPLICATE_CUSTOMER_MESSAGE)

        password_hash = await run_in_threadpool(hash_password, password)

        try:
            return await self.create(
                full_name=full_name,
                national_id=national_id,
                username=username,
                account_number=account_number,
                password_hash=password_hash,
            )
        except IntegrityError:
            await self.rollback()
            logger.info("Signup rejected by unique constraint for username %s", username)
            raise ConflictException(DUPLICATE_CUSTOMER_MESSAGE) from None

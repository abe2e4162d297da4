"""Base repository class for data access layer.

Provides generic read/create operations with transaction support and
FastAPI DI compatibility.
"""

from typing import Annotated
from typing import Any
from typing import Generic
from typing import Self
from typing import TypeVar

from fastapi import Depends
from sqlalchemy import ColumnElement
from sqlalchemy import exists
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .entity import Entity
from src.core.database import get_session


# Type alias for filter conditions
FilterType = ColumnElement[bool] | bool

EntityT = TypeVar("EntityT", bound=Entity)


class Repository(Generic[EntityT]):
    """Base repository with generic data access operations.

    Usage with FastAPI (automatic dependency injection):
        ```python
        from typing import Annotated
        from fastapi import Depends

        class CustomerRepository(Repository[Customer]):
            pass  # Entity type auto-detected from generic parameter

        @router.post("/check-user")
        async def check_user(
            customer_repo: Annotated[CustomerRepository, Depends()],
        ):
            return await customer_repo.select_one(Customer.username == "jane")
        ```

    Usage outside a request (manual instantiation):
        ```python
        async with AsyncSessionLocal() as session:
            repo = EmployeeRepository(session)
            employee = await repo.select_one(Employee.employee_id == "E001")
        ```

    Attributes:
        _entity: The SQLAlchemy entity class (auto-detected from type parameter).
        _session: The async database session.
    """

    _entity: type[Entity]
    __orig_bases__: tuple[type, ...]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Extract entity type when a subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._entity = cls.__orig_bases__[0].__args__[0]

    def __init__(
        self,
        session: Annotated[AsyncSession, Depends(get_session)],
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session (from DI or context manager).
        """
        self._session = session

    def with_session(self, session: AsyncSession) -> Self:
        """Create a new repository instance with different session.

        Args:
            session: New async session to use.

        Returns:
            New repository instance with the given session.
        """
        return self.__class__(session)

    # =========================================================================
    # EXISTS OPERATIONS
    # =========================================================================

    async def exists(self, *filters: FilterType) -> bool:
        """Check if any entity exists matching filters.

        Args:
            *filters: SQLAlchemy filter conditions.

        Returns:
            True if at least one entity matches.

        Example:
            if await repo.exists(Customer.username == username):
                raise ConflictException("Username already registered")
        """
        stmt = select(exists().where(*filters))
        result = await self._session.execute(stmt)
        return result.scalar_one()

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def select_one(self, *filters: FilterType) -> EntityT | None:
        """Get the first entity matching filters, or None if not found.

        Args:
            *filters: SQLAlchemy filter conditions.

        Returns:
            The matching entity or None.

        Example:
            customer = await repo.select_one(Customer.account_number == "1234567890")
        """
        stmt = select(self._entity).where(*filters).limit(1)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    async def create(self, *, flush: bool = True, **kwargs: Any) -> EntityT:
        """Create a single entity.

        Args:
            flush: Whether to flush immediately (default True).
            **kwargs: Entity field values.

        Returns:
            The created entity.
        """
        instance = self._entity(**kwargs)
        self._session.add(instance)

        if flush:
            await self._session.flush()

        return instance

    # =========================================================================
    # TRANSACTION OPERATIONS
    # =========================================================================

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._session.commit()

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self._session.rollback()

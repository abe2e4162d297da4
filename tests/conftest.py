"""Global test fixtures for the customer portal."""

# ruff: noqa: E402
# Set test environment BEFORE importing application modules
import os


os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-signing-secret"

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from src.abstract.entity import Entity
from src.core import settings
from src.core.database import get_session
from src.core.jwt import TokenService
from src.domains.customers.entities import Customer
from src.domains.customers.repositories import CustomerRepository
from src.domains.employees.entities import Employee
from src.domains.employees.repositories import EmployeeRepository
from src.main import app


CUSTOMER_PASSWORD = "s3cret-pass"
EMPLOYEE_PASSWORD = "staff-pass"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Provide a fresh in-memory database with the full schema per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Entity.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def token_service() -> TokenService:
    """Provide a TokenService bound to the test signing secret."""
    return TokenService(settings)


@pytest.fixture
def customer_repository(db_session) -> CustomerRepository:
    return CustomerRepository(db_session)


@pytest.fixture
def employee_repository(db_session) -> EmployeeRepository:
    return EmployeeRepository(db_session)


# =============================================================================
# ACCOUNT FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def customer(customer_repository) -> Customer:
    """Create a committed customer account."""
    customer = await customer_repository.create_customer(
        full_name="Jane Doe",
        national_id="9001015009087",
        username="Jane_Doe",
        account_number="1234567890",
        password=CUSTOMER_PASSWORD,
    )
    await customer_repository.commit()
    return customer


@pytest_asyncio.fixture
async def employee(employee_repository) -> Employee:
    """Create a committed employee account."""
    employee = await employee_repository.create_employee(
        employee_id="EMP001",
        password=EMPLOYEE_PASSWORD,
        full_name="Sam Teller",
        role="teller",
        department="Payments",
    )
    await employee_repository.commit()
    return employee


# =============================================================================
# API CLIENT FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient]:
    """Provide an async HTTP client whose requests each get their own session."""

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

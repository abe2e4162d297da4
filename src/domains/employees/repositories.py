"""Employee data access."""

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError

from src.abstract import Repository
from src.core.security import hash_password
from src.exceptions import ConflictException

from .entities import Employee


class EmployeeRepository(Repository[Employee]):
    """Lookup and provisioning of employee accounts."""

    async def find_employee_by_employee_id(self, employee_id: str) -> Employee | None:
        """Find an employee by staff identifier (exact match)."""
        return await self.select_one(Employee.employee_id == employee_id)

    async def create_employee(
        self,
        *,
        employee_id: str,
        password: str,
        full_name: str,
        role: str,
        department: str,
    ) -> Employee:
        """Provision an employee, hashing the password before it is persisted.

        Raises:
            ConflictException: If the employee ID is already taken.
        """
        if await self.exists(Employee.employee_id == employee_id):
            raise ConflictException(f"Employee {employee_id} already exists")

        password_hash = await run_in_threadpool(hash_password, password)

        try:
            return await self.create(
                employee_id=employee_id,
                password_hash=password_hash,
                full_name=full_name,
                role=role,
                department=department,
            )
        except IntegrityError:
            await self.rollback()
            raise ConflictException(f"Employee {employee_id} already exists") from None

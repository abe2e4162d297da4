"""Employee authentication services."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool

from src.abstract import Service
from src.core.config import Settings
from src.core.config import get_settings
from src.core.jwt import TokenService
from src.core.jwt import get_token_service
from src.core.security import verify_password
from src.exceptions import BadRequestException
from src.exceptions import InvalidCredentialsException
from src.utilities.enums import PrincipalType

from .entities import Employee
from .repositories import EmployeeRepository
from .schemas import EmployeeAuthResponse
from .schemas import EmployeeLoginRequest
from .schemas import EmployeeProfile


logger = logging.getLogger(__name__)

INVALID_EMPLOYEE_CREDENTIALS = "Invalid employee credentials"


class EmployeeAuthService(Service):
    """Employee login.

    Unknown employee IDs and wrong passwords produce the same message so the
    login endpoint does not reveal which employee IDs exist.
    """

    def __init__(
        self,
        employee_repo: Annotated[EmployeeRepository, Depends()],
        token_service: Annotated[TokenService, Depends(get_token_service)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> None:
        self._employee_repo = employee_repo
        self._token_service = token_service
        self._settings = settings

    async def login(self, request: EmployeeLoginRequest) -> EmployeeAuthResponse:
        """Authenticate an employee and issue an 8-hour session token.

        Raises:
            BadRequestException: If employee ID or password is missing.
            InvalidCredentialsException: If the employee is unknown or the
                password is wrong.
        """
        employee_id, password = request.employee_id, request.password

        if not isinstance(employee_id, str) or not employee_id or not password:
            raise BadRequestException("Employee ID and password are required")

        employee = await self._employee_repo.find_employee_by_employee_id(employee_id)
        if employee is None:
            logger.info("Employee login failed: unknown employee ID")
            raise InvalidCredentialsException(INVALID_EMPLOYEE_CREDENTIALS)

        if not await run_in_threadpool(verify_password, password, employee.password_hash):
            logger.info("Employee login failed for %s: wrong password", employee.employee_id)
            raise InvalidCredentialsException(INVALID_EMPLOYEE_CREDENTIALS)

        logger.info("Employee %s logged in", employee.employee_id)

        return EmployeeAuthResponse(
            message="Employee login successful",
            employee=self._to_profile(employee),
            token=self._issue_token(employee),
        )

    def _issue_token(self, employee: Employee) -> str:
        return self._token_service.issue(
            subject=str(employee.pk),
            principal_type=PrincipalType.EMPLOYEE,
            role=employee.role,
            expires_in=self._settings.employee_token_ttl,
            employeeId=employee.employee_id,
        )

    @staticmethod
    def _to_profile(employee: Employee) -> EmployeeProfile:
        return EmployeeProfile(
            id=str(employee.pk),
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            role=employee.role,
            department=employee.department,
        )

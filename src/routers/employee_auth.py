"""Employee authentication API routes."""

from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import status

from src.domains.employees.schemas import EmployeeAuthResponse
from src.domains.employees.schemas import EmployeeLoginRequest
from src.domains.employees.services import EmployeeAuthService
from src.exceptions import fault_boundary


router = APIRouter(prefix="/api/employee/auth", tags=["Employee Authentication"])


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    summary="Employee login",
    responses={
        200: {"description": "Login successful, session token returned"},
        400: {"description": "Missing fields or invalid employee credentials"},
        500: {"description": "Unexpected storage or signing failure"},
    },
)
async def employee_login(
        request: EmployeeLoginRequest,
        employee_service: Annotated[EmployeeAuthService, Depends()],
) -> EmployeeAuthResponse:
    """Log in with employee ID and password; the token embeds the employee's role."""
    async with fault_boundary("Error during employee login"):
        return await employee_service.login(request)

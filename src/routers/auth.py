"""Customer authentication API routes."""

from datetime import UTC
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import status

from src.core.config import Settings
from src.core.config import get_settings
from src.domains.customers.schemas import AuthStatusResponse
from src.domains.customers.schemas import CheckUserRequest
from src.domains.customers.schemas import CheckUserResponse
from src.domains.customers.schemas import CustomerAuthResponse
from src.domains.customers.schemas import LoginRequest
from src.domains.customers.schemas import SignupRequest
from src.domains.customers.services import CustomerAuthService
from src.exceptions import fault_boundary


router = APIRouter(prefix="/api/auth", tags=["Customer Authentication"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
    responses={
        201: {"description": "Customer created, session token returned"},
        400: {"description": "Validation failed or identity already registered"},
        500: {"description": "Unexpected storage or signing failure"},
    },
)
async def signup(
        request: SignupRequest,
        customer_service: Annotated[CustomerAuthService, Depends()],
) -> CustomerAuthResponse:
    """Register a customer and return the public profile with a 7-day token.

    All field errors are reported together under ``errors``.
    """
    async with fault_boundary("Error creating user"):
        return await customer_service.signup(request)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    summary="Customer login",
    responses={
        200: {"description": "Login successful, session token returned"},
        400: {"description": "Missing or malformed fields, or invalid credentials"},
        500: {"description": "Unexpected storage or signing failure"},
    },
)
async def login(
        request: LoginRequest,
        customer_service: Annotated[CustomerAuthService, Depends()],
) -> CustomerAuthResponse:
    """Log in with a password and a username and/or account number.

    When both identifiers are supplied, both must belong to the same account.
    """
    async with fault_boundary("Error during login"):
        return await customer_service.login(request)


@router.get("/test", summary="Auth diagnostic")
async def auth_status(settings: Annotated[Settings, Depends(get_settings)]) -> AuthStatusResponse:
    """Report that the auth API is up and whether the signing secret is configured."""
    return AuthStatusResponse(
        message="Auth API is working!",
        timestamp=datetime.now(UTC).isoformat(),
        jwt_secret="Set" if settings.jwt_secret_configured else "Not set",
    )


@router.post(
    "/check-user",
    summary="Check whether a customer exists",
    response_model_exclude_none=True,
)
async def check_user(
        request: CheckUserRequest,
        customer_service: Annotated[CustomerAuthService, Depends()],
) -> CheckUserResponse:
    """Look up a customer by username and/or account number without a password.

    Unauthenticated: anyone can use this to learn whether an account exists.
    """
    async with fault_boundary("Error checking user"):
        return await customer_service.check_user(request)

"""Customer authentication services."""

import logging
from typing import Annotated
from typing import Any

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
from src.exceptions import ValidationException
from src.utilities.enums import PrincipalType

from .entities import Customer
from .repositories import CustomerRepository
from .schemas import CheckUserRequest
from .schemas import CheckUserResponse
from .schemas import CustomerAuthResponse
from .schemas import CustomerProfile
from .schemas import LoginRequest
from .schemas import SignupRequest
from .validators import is_valid
from .validators import sanitize
from .validators import validate_signup


logger = logging.getLogger(__name__)

INVALID_CUSTOMER_CREDENTIALS = "Invalid credentials"


def _identifier(value: Any) -> Any:
    """Accept integer identifiers as their decimal string; pass others through."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def to_profile(customer: Customer) -> CustomerProfile:
    """Project a customer onto its public fields."""
    return CustomerProfile(
        id=str(customer.pk),
        full_name=customer.full_name,
        username=customer.username,
        account_number=customer.account_number,
    )


class CustomerAuthService(Service):
    """Customer signup, login and existence checks.

    Each operation walks received → validated → looked-up → verified →
    responded, raising an application exception at whichever stage fails.
    """

    def __init__(
        self,
        customer_repo: Annotated[CustomerRepository, Depends()],
        token_service: Annotated[TokenService, Depends(get_token_service)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> None:
        """Initialize service with dependencies.

        Args:
            customer_repo: Repository for customer records.
            token_service: Service signing session tokens.
            settings: Application settings (token lifetime).
        """
        self._customer_repo = customer_repo
        self._token_service = token_service
        self._settings = settings

    def _issue_token(self, customer: Customer) -> str:
        return self._token_service.issue(
            subject=str(customer.pk),
            principal_type=PrincipalType.CUSTOMER,
            role=PrincipalType.CUSTOMER.value,
            expires_in=self._settings.customer_token_ttl,
            username=customer.username,
        )

    async def signup(self, request: SignupRequest) -> CustomerAuthResponse:
        """Register a new customer and open a session.

        Raises:
            ValidationException: If any field fails its pattern (all reported).
            ConflictException: If username, ID number or account number is taken.
        """
        fields = {
            "fullName": sanitize(request.full_name),
            "idNumber": sanitize(request.id_number),
            "username": sanitize(request.username),
            "accountNumber": sanitize(request.account_number),
            "password": request.password,
        }

        errors = validate_signup(fields)
        if errors:
            logger.debug("Signup validation failed: %s", errors)
            raise ValidationException(errors)

        customer = await self._customer_repo.create_customer(
            full_name=fields["fullName"],
            national_id=fields["idNumber"],
            username=fields["username"],
            account_number=fields["accountNumber"],
            password=request.password,
        )
        await self._customer_repo.commit()
        logger.info("Customer %s created", customer.pk)

        return CustomerAuthResponse(
            message="User created successfully",
            user=to_profile(customer),
            token=self._issue_token(customer),
        )

    async def login(self, request: LoginRequest) -> CustomerAuthResponse:
        """Authenticate a customer by username and/or account number.

        When both identifiers are given both must match the same record. An
        unknown account and a wrong password produce the same client message;
        the log records which one it was.

        Raises:
            BadRequestException: If the password or both identifiers are
                missing, or a supplied identifier is malformed.
            InvalidCredentialsException: If no customer matches or the
                password is wrong.
        """
        username = _identifier(request.username)
        account_number = _identifier(request.account_number)
        password = request.password

        if not password:
            raise BadRequestException("Password is required")
        if not username and not account_number:
            raise BadRequestException("Username or account number is required")
        if username and not is_valid("username", username):
            raise BadRequestException("Invalid username format")
        if account_number and not is_valid("accountNumber", account_number):
            raise BadRequestException("Invalid account number format")

        customer = await self._customer_repo.find_customer_by(
            username=username or None,
            account_number=account_number or None,
        )
        if customer is None:
            logger.info("Customer login failed: no matching account")
            raise InvalidCredentialsException(INVALID_CUSTOMER_CREDENTIALS)

        if not await run_in_threadpool(verify_password, password, customer.password_hash):
            logger.info("Customer login failed for %s: wrong password", customer.pk)
            raise InvalidCredentialsException(INVALID_CUSTOMER_CREDENTIALS)

        logger.info("Customer %s logged in", customer.pk)

        return CustomerAuthResponse(
            message="Login successful",
            user=to_profile(customer),
            token=self._issue_token(customer),
        )

    async def check_user(self, request: CheckUserRequest) -> CheckUserResponse:
        """Report whether a customer exists, without any password check.

        This answers existence questions for unauthenticated callers, which
        lets anyone test for accounts; callers accept that in exchange for
        the pre-login lookup the portal UI relies on.

        Returns:
            Existence flag, plus the public profile when a customer matched.
        """
        username, account_number = _identifier(request.username), _identifier(request.account_number)
        username = username if isinstance(username, str) else None
        account_number = account_number if isinstance(account_number, str) else None

        customer = await self._customer_repo.find_customer_by(
            username=username,
            account_number=account_number,
        )
        if customer is None:
            return CheckUserResponse(exists=False)
        return CheckUserResponse(exists=True, user=to_profile(customer))

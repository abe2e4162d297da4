"""JWT session token issuance and verification.

Tokens are stateless: nothing is stored server-side and there is no
revocation list, so a validly signed, unexpired token is the whole proof of
a session. Each token carries a ``type`` claim naming its principal type.
"""

from collections.abc import Callable
from datetime import UTC
from datetime import datetime
from datetime import timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JWTError
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from src.core.config import Settings
from src.core.config import get_settings
from src.exceptions import ExpiredTokenException
from src.exceptions import InvalidTokenException
from src.utilities.enums import PrincipalType


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: current UTC time."""
    return datetime.now(UTC)


class TokenPayload(BaseModel):
    """Decoded token payload with validated fields."""

    model_config = ConfigDict(populate_by_name=True)

    sub: str = Field(description="Subject ID (customer or employee primary key)")
    type: PrincipalType = Field(description="Principal type: 'customer' or 'employee'")
    role: str = Field(description="Subject role")
    exp: int = Field(description="Expiration timestamp")
    iat: int = Field(description="Issued at timestamp")
    username: str | None = Field(default=None, description="Customer username (customer only)")
    employee_id: str | None = Field(default=None, alias="employeeId", description="Employee ID (employee only)")


class TokenService:
    """Signs and verifies session tokens.

    The signing key comes from settings, which refuse to load without one,
    so there is no code path that signs with a default key.

    Usage with FastAPI (dependency injection):
        ```python
        @router.post("/login")
        async def login(
            token_service: Annotated[TokenService, Depends(get_token_service)],
        ):
            token = token_service.issue(
                subject=str(user.pk),
                principal_type=PrincipalType.CUSTOMER,
                role="customer",
                expires_in=timedelta(days=7),
            )
        ```

    Usage in tests (fixed clock):
        ```python
        issued_at = datetime(2024, 1, 1, tzinfo=UTC)
        service = TokenService(settings, clock=lambda: issued_at)
        ```
    """

    def __init__(self, settings: Settings, clock: Clock = utc_now) -> None:
        """Initialize token service.

        Args:
            settings: Application settings holding the signing key.
            clock: Source of the current time used for ``iat``/``exp``.
        """
        self._secret_key = settings.jwt_secret.get_secret_value()
        self._algorithm = settings.jwt_algorithm
        self._clock = clock

    def issue(
        self,
        subject: str,
        principal_type: PrincipalType,
        role: str,
        expires_in: timedelta,
        **claims: Any,
    ) -> str:
        """Create a signed session token.

        Args:
            subject: Subject identifier.
            principal_type: Customer or employee.
            role: Subject role embedded in the token.
            expires_in: Token lifetime.
            **claims: Extra display claims (e.g. ``username``).

        Returns:
            Encoded JWT.
        """
        now = self._clock()
        exp = now + expires_in

        payload = {
            **claims,
            "sub": subject,
            "type": principal_type.value,
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str, principal_type: PrincipalType | None = None) -> TokenPayload:
        """Verify signature and expiry, then return the payload.

        Args:
            token: Encoded JWT.
            principal_type: If given, the token's ``type`` claim must match.

        Returns:
            Validated token payload.

        Raises:
            ExpiredTokenException: If the token has expired.
            InvalidTokenException: If the token is malformed, tampered with,
                or of a different principal type.
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError:
            raise InvalidTokenException() from None

        exp = payload.get("exp")
        if not isinstance(exp, int) or isinstance(exp, bool):
            raise InvalidTokenException()
        if exp <= int(self._clock().timestamp()):
            raise ExpiredTokenException()

        if payload.get("type") not in PrincipalType.values():
            raise InvalidTokenException()
        if principal_type is not None and payload["type"] != principal_type:
            raise InvalidTokenException()

        return TokenPayload(**payload)


def get_token_service() -> TokenService:
    """FastAPI dependency providing a token service bound to app settings."""
    return TokenService(get_settings())

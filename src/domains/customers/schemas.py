"""Customer request and response schemas.

Request fields are typed ``Any`` on purpose: shape checking belongs to the
validators so that every failing field is reported in one 400 response
instead of FastAPI's generic 422.
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema using camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ─── Requests ─────────────────────────────────────────────────────────────────


class SignupRequest(CamelModel):
    """Customer signup payload."""

    full_name: Any = None
    id_number: Any = None
    username: Any = None
    account_number: Any = None
    password: Any = None


class LoginRequest(CamelModel):
    """Customer login payload. At least one identifier is required."""

    username: Any = None
    account_number: Any = None
    password: Any = None


class CheckUserRequest(CamelModel):
    """Account existence lookup payload."""

    username: Any = None
    account_number: Any = None


# ─── Responses ────────────────────────────────────────────────────────────────


class CustomerProfile(CamelModel):
    """Public customer fields. Never carries the password hash."""

    id: str
    full_name: str
    username: str
    account_number: str


class CustomerAuthResponse(BaseModel):
    """Signup/login success body."""

    message: str
    user: CustomerProfile
    token: str = Field(description="Signed customer session token")


class CheckUserResponse(BaseModel):
    """Existence check body; ``user`` is omitted when nothing matched."""

    exists: bool
    user: CustomerProfile | None = None


class AuthStatusResponse(BaseModel):
    """Diagnostic body for the auth namespace."""

    message: str
    timestamp: str
    jwt_secret: str

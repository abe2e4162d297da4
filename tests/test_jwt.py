"""Tests for session token issuance and verification."""

from datetime import UTC
from datetime import datetime
from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.jwt import TokenService
from src.exceptions import ExpiredTokenException
from src.exceptions import InvalidTokenException
from src.utilities.enums import PrincipalType


def _fixed(moment: datetime) -> TokenService:
    settings = Settings(database_url="sqlite+aiosqlite://", jwt_secret="test-signing-secret")
    return TokenService(settings, clock=lambda: moment)


def test_round_trip_carries_subject_and_role(token_service):
    token = token_service.issue(
        subject="abc-123",
        principal_type=PrincipalType.EMPLOYEE,
        role="manager",
        expires_in=timedelta(hours=8),
        employeeId="EMP001",
    )

    payload = token_service.decode(token)

    assert payload.sub == "abc-123"
    assert payload.type == PrincipalType.EMPLOYEE
    assert payload.role == "manager"
    assert payload.employee_id == "EMP001"
    assert payload.exp - payload.iat == 8 * 3600


def test_token_issued_long_ago_expired(token_service):
    issued_at = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
    token = _fixed(issued_at).issue(
        subject="abc-123",
        principal_type=PrincipalType.CUSTOMER,
        role="customer",
        expires_in=timedelta(days=7),
    )

    # Signature is valid but the 7-day window closed long ago
    with pytest.raises(ExpiredTokenException):
        token_service.decode(token)


def test_token_still_valid_just_inside_lifetime(token_service):
    ttl = timedelta(days=7)
    issued_at = datetime.now(UTC) - ttl + timedelta(minutes=5)
    token = _fixed(issued_at).issue(
        subject="abc-123",
        principal_type=PrincipalType.CUSTOMER,
        role="customer",
        expires_in=ttl,
    )

    assert token_service.decode(token).sub == "abc-123"


def test_token_expired_just_past_lifetime(token_service):
    ttl = timedelta(hours=8)
    issued_at = datetime.now(UTC) - ttl - timedelta(minutes=5)
    token = _fixed(issued_at).issue(
        subject="abc-123",
        principal_type=PrincipalType.EMPLOYEE,
        role="teller",
        expires_in=ttl,
    )

    with pytest.raises(ExpiredTokenException):
        token_service.decode(token)


def test_decode_checks_expiry_against_injected_clock():
    issued_at = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
    ttl = timedelta(hours=8)
    token = _fixed(issued_at).issue(
        subject="abc-123",
        principal_type=PrincipalType.EMPLOYEE,
        role="teller",
        expires_in=ttl,
    )

    assert _fixed(issued_at + ttl - timedelta(seconds=1)).decode(token).sub == "abc-123"
    with pytest.raises(ExpiredTokenException):
        _fixed(issued_at + ttl).decode(token)


def test_token_signed_with_other_secret_rejected(token_service):
    other = TokenService(Settings(database_url="sqlite+aiosqlite://", jwt_secret="someone-else"))
    token = other.issue(
        subject="abc-123",
        principal_type=PrincipalType.CUSTOMER,
        role="customer",
        expires_in=timedelta(days=7),
    )

    with pytest.raises(InvalidTokenException):
        token_service.decode(token)


def test_principal_type_mismatch_rejected(token_service):
    token = token_service.issue(
        subject="abc-123",
        principal_type=PrincipalType.CUSTOMER,
        role="customer",
        expires_in=timedelta(days=7),
    )

    with pytest.raises(InvalidTokenException):
        token_service.decode(token, principal_type=PrincipalType.EMPLOYEE)


def test_garbage_token_rejected(token_service):
    with pytest.raises(InvalidTokenException):
        token_service.decode("not.a.token")


@pytest.mark.parametrize("secret", [None, "", "   "])
def test_settings_refuse_missing_signing_secret(monkeypatch, secret):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    kwargs = {"database_url": "sqlite+aiosqlite://", "_env_file": None}
    if secret is not None:
        kwargs["jwt_secret"] = secret

    with pytest.raises(ValidationError):
        Settings(**kwargs)


def test_settings_refuse_missing_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(jwt_secret="x", _env_file=None)

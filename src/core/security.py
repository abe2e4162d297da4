"""Password hashing and verification.

Hashing goes through a passlib ``CryptContext`` so the scheme can be rotated
without touching callers; comparison is constant-time inside passlib.
"""

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password.

    Returns:
        Opaque hash string suitable for storage.
    """
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str | None) -> bool:
    """Check a plaintext candidate against a stored hash.

    A missing or unrecognised stored hash never matches.

    Args:
        plain: Candidate plaintext password.
        hashed: Stored hash.

    Returns:
        True if the password matches.
    """
    if not hashed or not isinstance(plain, str):
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False

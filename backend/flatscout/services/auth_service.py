"""Authentication helpers: bcrypt password hashing and password rules."""

import bcrypt

from flatscout.config import get_settings

BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    encoded = password.encode("utf-8")
    # bcrypt refuses input past 72 bytes; no stored password is that long
    if len(encoded) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed.encode("utf-8"))


def password_problem(password: str) -> str | None:
    """Return a user-facing reason the password is unacceptable, or None."""
    min_length = get_settings().min_password_length
    if len(password) < min_length:
        return f"Password must be at least {min_length} characters."
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return f"Password must be at most {BCRYPT_MAX_BYTES} bytes."
    return None


def normalize_email(email: str) -> str:
    return email.strip().lower()

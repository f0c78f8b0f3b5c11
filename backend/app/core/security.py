"""
Security utilities: salted password hashing and session token generation.
"""

import hmac
import secrets

import bcrypt

from app.config import settings

# Use bcrypt directly instead of passlib to avoid initialization issues
# passlib has problems with bcrypt 5.0.0+ during initialization


def generate_salt() -> str:
    """Generate a fresh per-user bcrypt salt."""
    return bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS).decode("utf-8")


def hash_password(password: str, salt: str) -> str:
    """Hash a password with the given salt."""
    return bcrypt.hashpw(password.encode("utf-8"), salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, salt: str, hashed_password: str) -> bool:
    """Recompute the hash with the stored salt and compare in constant time."""
    try:
        candidate = hash_password(plain_password, salt)
    except ValueError:
        # bcrypt >= 5 raises for inputs over 72 bytes
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), hashed_password.encode("utf-8"))


def generate_session_token() -> str:
    """Create a new opaque session token."""
    return secrets.token_hex(settings.SESSION_TOKEN_BYTES)

"""Password hashing utilities (bcrypt)."""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plaintext password
        rounds: bcrypt work factor

    Returns:
        bcrypt hash as text ($2b$...)
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a bcrypt hash.

    Returns False for a hash bcrypt cannot parse rather than raising.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False

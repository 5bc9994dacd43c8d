"""Password hashing with bcrypt."""

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as a string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Malformed hashes count as a mismatch.
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        return False

"""Password hashing utilities."""

import bcrypt

# bcrypt only uses the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Raw password
        rounds: bcrypt work factor

    Returns:
        Salted bcrypt hash
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds)).decode()


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against its bcrypt hash.

    Malformed hashes never match.
    """
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        return False

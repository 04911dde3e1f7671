"""
Password Hashing

bcrypt hashing for assistant passwords. Plain passwords are never stored.
"""

from typing import Optional

import bcrypt

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plain text password.

    Args:
        password: Plain text password from the request body
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash, safe to store
    """
    return bcrypt.hashpw(
        password.encode("utf-8"),
        bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash."""
    if not password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Malformed or non-bcrypt hash
        return False


async def check_assistant_password(repository, assistant_id: str, password: str) -> Optional[bool]:
    """
    Verify a password against an assistant's stored hash.

    Args:
        repository: AssistantRepository to read the hash from
        assistant_id: Already-sanitized assistant id
        password: Plain text password to check

    Returns:
        True/False for match/mismatch, None if the assistant does not exist
    """
    hashed = await repository.get_password_hash(assistant_id)
    if hashed is None:
        return None
    return verify_password(password, hashed)

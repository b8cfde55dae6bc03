"""Password hashing utilities.

Uses bcrypt with a per-hash random salt and a configurable cost factor.
"""

from functools import lru_cache

import bcrypt

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes; longer inputs are rejected upstream.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a password using bcrypt.

    Args:
        password: The plaintext password
        rounds: bcrypt cost factor (log2 of the iteration count)

    Returns:
        The bcrypt hash as a string (salt embedded)
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash using constant-time comparison.

    Args:
        password: The plaintext password to verify
        password_hash: The bcrypt hash to verify against

    Returns:
        True if the password matches the hash, False otherwise
    """
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Invalid hash format or over-long password
        return False


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_password("agrofix-dummy-password", rounds=rounds)


def burn_password_check(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
    """Spend the same bcrypt work as a real check without a stored hash.

    Called when a login names an unknown user so the response time does
    not reveal whether the account exists.
    """
    verify_password(password, _dummy_hash(rounds))

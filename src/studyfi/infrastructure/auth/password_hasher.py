"""Password hashing utility using Argon2.

Passwords are stored only as Argon2id hashes; plaintext never reaches the
database.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Every call uses a fresh salt, so hashing the same password twice yields
    different strings.

    Example:
        >>> hashed = hash_password("Abcdefg1!")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    No request path authenticates, so this is not exported from the
    package; it checks stored credentials in tests.

    Args:
        password: The plaintext password to verify.
        hashed: The stored hash.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        _hasher.verify(hashed, password)
        return True
    except (VerifyMismatchError, InvalidHashError):
        return False

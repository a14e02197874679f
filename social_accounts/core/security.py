# External package imports
import bcrypt

# Local application imports
from .exceptions import ComparisonFailure, HashingFailure

# bcrypt only reads this many bytes of the password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    """Encode a password and keep the bytes bcrypt actually uses"""
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def generate_salt(rounds: int) -> bytes:
    """
    Generate a bcrypt salt

    Args:
        rounds: Work factor (log2 of the number of key expansion rounds)

    Returns:
        Salt bytes carrying the work factor

    Raises:
        HashingFailure: If bcrypt rejects the work factor
    """
    try:
        return bcrypt.gensalt(rounds=rounds)
    except ValueError as e:
        raise HashingFailure(f"Error in creating bcrypt salt: {str(e)}") from e


def hash_password(plain_password: str, salt: bytes) -> str:
    """
    Hash a plain password with the given salt using bcrypt

    Only the first 72 UTF-8 bytes are used, the same bytes bcrypt reads.
    verify_password applies the same cut so long passwords still match.

    Args:
        plain_password: The plain text password to hash
        salt: Salt produced by generate_salt

    Returns:
        Hashed password string

    Raises:
        HashingFailure: If bcrypt cannot hash the input
    """
    try:
        hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    except (ValueError, TypeError, AttributeError) as e:
        raise HashingFailure(f"Error in hashing password: {str(e)}") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise

    Raises:
        ComparisonFailure: If the stored hash is malformed or empty
    """
    if not isinstance(plain_password, str) or not isinstance(hashed_password, str):
        raise ComparisonFailure(
            f"Error in authenticating password: expected str, got "
            f"{type(plain_password).__name__} and {type(hashed_password).__name__}"
        )

    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError) as e:
        raise ComparisonFailure(f"Error in authenticating password: {str(e)}") from e

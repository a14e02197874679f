"""
Exception hierarchy for user accounts and credentials.

Validation errors subclass ValueError so callers that only care about
"bad input" can keep catching ValueError, as the use cases do.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all account errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class UserValidationError(AccountError, ValueError):
    """
    Raised when a user record fails validation.

    ``errors`` maps a field name to its message, the way a document
    validator reports every invalid path at once.
    """

    def __init__(self, errors: Dict[str, str]):
        message = "; ".join(f"{field}: {text}" for field, text in errors.items())
        super().__init__(
            message,
            user_message=next(iter(errors.values()), None),
            details={"errors": dict(errors)},
        )
        self.errors = dict(errors)


class InvalidCredential(UserValidationError):
    """
    Raised when the pending password breaks the password policy.

    Other invalid fields found in the same pass are reported alongside.
    """

    def __init__(self, messages: List[str], field_errors: Optional[Dict[str, str]] = None):
        errors = dict(field_errors or {})
        errors["password"] = " ".join(messages)
        super().__init__(errors)
        self.messages = list(messages)


class DuplicateEmailError(UserValidationError):
    """Raised when another record already uses the email address."""

    def __init__(self, email: str):
        super().__init__({"email": "Email already exists"})
        self.email = email


# -----------------------------------------------------------------------------
# Hashing service
# -----------------------------------------------------------------------------


class HashingFailure(AccountError):
    """Raised when salt generation or hashing fails. Aborts the persist."""
    pass


class ComparisonFailure(AccountError):
    """Raised when the compare primitive errors (not a mismatch)."""
    pass


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class UserNotFoundError(AccountError, LookupError):
    """Raised when a referenced user does not exist."""

    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}", user_message="User not found")
        self.user_id = user_id

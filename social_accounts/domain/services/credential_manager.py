"""
Credential manager
------------------

Owns the plaintext-to-hash transition for a User and answers authentication
checks. The persistence layer drives it in a fixed order before every write:

    validate_before_persist()  ->  encrypt_before_persist()  ->  write

A failed validation leaves the record untouched (the pending plaintext is kept
so the caller can fix it and retry). A hashing failure aborts the write.
"""

# Standard library imports
import logging
from typing import List

# Local application imports
from ...core.exceptions import ComparisonFailure, InvalidCredential
from ..models.user import User
from .hashing_service import HashingService

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10
DEFAULT_MIN_LENGTH = 6


class CredentialManager:
    """Password policy, hashing and verification for user records"""

    def __init__(
        self,
        hashing_service: HashingService,
        rounds: int = DEFAULT_ROUNDS,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self.hashing_service = hashing_service
        self.rounds = rounds
        self.min_length = min_length

    def password_errors(self, user: User, is_new: bool) -> List[str]:
        """
        Evaluate the password rules without raising

        Both rules are always checked.

        Args:
            user: Record about to be written
            is_new: True when the record is being created

        Returns:
            List of error messages (empty when the password state is valid)
        """
        errors: List[str] = []
        pending = user.pending_password
        if pending and len(pending) < self.min_length:
            errors.append(f"Password must be at least {self.min_length} characters")
        if is_new and not pending:
            errors.append("Password is required")
        return errors

    def validate_before_persist(self, user: User, is_new: bool) -> None:
        """
        Check the pending password before a write

        An existing record with no new password passes and keeps its hash.

        Raises:
            InvalidCredential: If the password is too short, or missing on create
        """
        errors = self.password_errors(user, is_new)
        if errors:
            raise InvalidCredential(errors)

    async def encrypt_before_persist(self, user: User) -> bool:
        """
        Hash the pending password into hashed_password

        Generates a fresh salt for every call, so hashing the same plaintext
        twice yields two different hashes.

        Returns:
            True if a new hash was stored, False if nothing was pending

        Raises:
            HashingFailure: If salt generation or hashing fails; the stored
                hash and the pending plaintext are left as they were
        """
        plain_password = user.pending_password
        if not plain_password:
            return False

        salt = await self.hashing_service.generate_salt(self.rounds)
        hashed_password = await self.hashing_service.hash(plain_password, salt)
        user.store_hash(hashed_password, hashed_from=plain_password)
        return True

    async def authenticate(self, user: User, plain_password: str) -> bool:
        """
        Check a sign-in attempt against the stored hash

        Args:
            user: Record holding the stored hash
            plain_password: Candidate password

        Returns:
            True on match; False on mismatch or if the comparison itself failed
        """
        try:
            return await self.hashing_service.compare(plain_password, user.hashed_password)
        except ComparisonFailure as e:
            logger.warning(f"Password comparison failed for user {user.id}: {e}")
            return False

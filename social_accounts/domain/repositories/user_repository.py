from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from ..models.user import User


@dataclass(frozen=True)
class PersistResult:
    """Outcome of a committed write"""
    user: User
    created: bool
    password_updated: bool


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    Writes go through two phases: validate() checks the record (profile
    fields and password rules) without side effects, then commit() hashes
    any pending password and writes the document. save() runs both, one
    persist at a time per record instance.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    def validate(self, user: User) -> None:
        """Validate user before a write; raises UserValidationError"""
        pass

    @abstractmethod
    async def commit(self, user: User) -> PersistResult:
        """Hash pending password (if any) and write the user"""
        pass

    @abstractmethod
    async def save(self, user: User) -> PersistResult:
        """Save user (create or update): validate, then commit"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user; returns False if nothing was deleted"""
        pass

    @abstractmethod
    async def follow(self, user_id: str, target_id: str) -> None:
        """Record that user_id follows target_id (both sides)"""
        pass

    @abstractmethod
    async def unfollow(self, user_id: str, target_id: str) -> None:
        """Remove the follow relation between user_id and target_id"""
        pass

from abc import ABC, abstractmethod


class HashingService(ABC):
    """
    Hashing service interface - salt generation, hashing and comparison.

    Implementations raise HashingFailure / ComparisonFailure when the
    underlying primitive errors, so a failure is never confused with a
    negative comparison.
    """

    @abstractmethod
    async def generate_salt(self, rounds: int) -> bytes:
        """Generate a random salt for the given work factor"""
        pass

    @abstractmethod
    async def hash(self, plain_password: str, salt: bytes) -> str:
        """Hash plaintext with the given salt"""
        pass

    @abstractmethod
    async def compare(self, plain_password: str, hashed_password: str) -> bool:
        """Check plaintext against a stored hash"""
        pass

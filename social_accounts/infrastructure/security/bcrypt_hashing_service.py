# Standard library imports
import asyncio
import logging
from typing import Any, Callable, Optional, Type

# Local application imports
from ...core.exceptions import AccountError, ComparisonFailure, HashingFailure
from ...core.security import generate_salt, hash_password, verify_password
from ...domain.services.hashing_service import HashingService

logger = logging.getLogger(__name__)


class BcryptHashingService(HashingService):
    """
    bcrypt implementation of HashingService.

    bcrypt is CPU-bound, so every call runs in a worker thread to keep the
    event loop free. Each call is bounded by ``timeout_seconds`` (None waits
    forever); a timeout is reported as the call's failure type.
    """

    def __init__(self, timeout_seconds: Optional[float] = None) -> None:
        self.timeout_seconds = timeout_seconds

    async def generate_salt(self, rounds: int) -> bytes:
        return await self._run(generate_salt, rounds, failure=HashingFailure, action="salt generation")

    async def hash(self, plain_password: str, salt: bytes) -> str:
        return await self._run(hash_password, plain_password, salt, failure=HashingFailure, action="hashing")

    async def compare(self, plain_password: str, hashed_password: str) -> bool:
        return await self._run(
            verify_password,
            plain_password,
            hashed_password,
            failure=ComparisonFailure,
            action="comparison",
        )

    async def _run(
        self,
        func: Callable[..., Any],
        *args: Any,
        failure: Type[AccountError],
        action: str,
    ) -> Any:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"bcrypt {action} timed out after {self.timeout_seconds}s")
            raise failure(f"Password {action} timed out after {self.timeout_seconds}s") from e

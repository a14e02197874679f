from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.services.hashing_service import HashingService
from ...domain.services.credential_manager import CredentialManager
from ...infrastructure.security.bcrypt_hashing_service import BcryptHashingService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the hashing service and the credential manager built on it"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        hashing_service = BcryptHashingService(timeout_seconds=settings.hash_timeout_seconds)
        container.register_singleton(HashingService, hashing_service)

        container.register_singleton(
            CredentialManager,
            CredentialManager(
                hashing_service=hashing_service,
                rounds=settings.bcrypt_rounds,
                min_length=settings.password_min_length,
            )
        )

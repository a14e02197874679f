from .hashing_service import HashingService
from .credential_manager import CredentialManager

__all__ = ["HashingService", "CredentialManager"]

from .bcrypt_hashing_service import BcryptHashingService

__all__ = ["BcryptHashingService"]

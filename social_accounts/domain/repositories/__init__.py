from .user_repository import PersistResult, UserRepository

__all__ = ["PersistResult", "UserRepository"]

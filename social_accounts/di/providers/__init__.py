from .database_provider import DatabaseProvider
from .security_provider import SecurityProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider


__all__ = [
    "DatabaseProvider",
    "SecurityProvider",
    "RepositoryProvider",
    "AuthProvider",
    "UserProvider",
]

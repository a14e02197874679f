from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.credential_manager import CredentialManager
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from ...application.use_cases.auth.change_password import ChangePasswordUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all credential-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            AuthenticateUserUseCase,
            lambda: AuthenticateUserUseCase(
                user_repository=container.get(UserRepository),
                credential_manager=container.get(CredentialManager),
            )
        )

        container.register_factory(
            ChangePasswordUseCase,
            lambda: ChangePasswordUseCase(
                user_repository=container.get(UserRepository),
                credential_manager=container.get(CredentialManager),
            )
        )

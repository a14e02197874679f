# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.credential_manager import CredentialManager
from ...dto.auth_dto import UserLoginRequest
from ...dto.user_dto import UserResponse


class AuthenticateUserUseCase:
    """Use case for checking a sign-in attempt"""

    def __init__(self, user_repository: UserRepository, credential_manager: CredentialManager) -> None:
        self.user_repository = user_repository
        self.credential_manager = credential_manager

    async def execute(self, request: UserLoginRequest) -> Optional[UserResponse]:
        """
        Authenticate user by email and password

        Args:
            request: Login request with email and password

        Returns:
            UserResponse if authentication successful, None otherwise
        """
        # Find user by email
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            return None

        # Verify password
        if not await self.credential_manager.authenticate(user, request.password):
            return None

        return UserResponse.from_user(user)

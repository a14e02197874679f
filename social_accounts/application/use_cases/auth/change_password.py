# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.credential_manager import CredentialManager
from ....core.exceptions import InvalidCredential, UserNotFoundError
from ...dto.auth_dto import PasswordChangeRequest
from ...dto.user_dto import UserResponse


class ChangePasswordUseCase:
    """Use case for replacing a user's password"""

    def __init__(self, user_repository: UserRepository, credential_manager: CredentialManager) -> None:
        self.user_repository = user_repository
        self.credential_manager = credential_manager

    async def execute(self, user_id: str, request: PasswordChangeRequest) -> UserResponse:
        """
        Change password after checking the current one

        Args:
            user_id: ID of the user changing their password
            request: Current and new password

        Returns:
            UserResponse for the updated user

        Raises:
            UserNotFoundError: If the user does not exist
            InvalidCredential: If the current password is wrong or the new one is invalid
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if not await self.credential_manager.authenticate(user, request.current_password):
            raise InvalidCredential(["Current password is incorrect"])

        user.set_password(request.new_password)
        result = await self.user_repository.save(user)

        return UserResponse.from_user(result.user)

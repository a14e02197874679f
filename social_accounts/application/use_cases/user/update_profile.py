# Standard library imports
from datetime import datetime, timezone

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError
from ...dto.profile_dto import ProfileUpdateRequest
from ...dto.user_dto import UserResponse


class UpdateProfileUseCase:
    """Use case for editing name, about and photo"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: ProfileUpdateRequest) -> UserResponse:
        """
        Apply profile changes and save

        No password is staged, so the stored hash is kept as is.

        Args:
            user_id: ID of the user to update
            request: Fields to change

        Returns:
            UserResponse for the updated user

        Raises:
            UserNotFoundError: If the user does not exist
            UserValidationError: If the new values are invalid
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if request.name is not None:
            user.name = request.name.strip()
        if request.about is not None:
            user.about = request.about.strip()
        if request.remove_photo:
            user.set_photo(None, None)
        elif request.photo is not None:
            user.set_photo(request.photo, request.photo_content_type)

        user.updated = datetime.now(timezone.utc)
        result = await self.user_repository.save(user)

        return UserResponse.from_user(result.user)

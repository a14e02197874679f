# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse


class FollowUserUseCase:
    """Use case for following another user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, target_id: str) -> UserResponse:
        """
        Follow target_id as user_id

        Returns:
            UserResponse for the follower, reloaded after the change

        Raises:
            ValueError: If a user tries to follow themselves
            UserNotFoundError: If either user does not exist
        """
        if user_id == target_id:
            raise ValueError("Users cannot follow themselves")

        if await self.user_repository.find_by_id(target_id) is None:
            raise UserNotFoundError(target_id)

        await self.user_repository.follow(user_id, target_id)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResponse.from_user(user)

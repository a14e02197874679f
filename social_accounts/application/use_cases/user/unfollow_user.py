# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse


class UnfollowUserUseCase:
    """Use case for unfollowing a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, target_id: str) -> UserResponse:
        if user_id == target_id:
            raise ValueError("Users cannot unfollow themselves")

        await self.user_repository.unfollow(user_id, target_id)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResponse.from_user(user)

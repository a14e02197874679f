# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for reading a user profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResponse.from_user(user)

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError


class DeleteUserUseCase:
    """Use case for deleting a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        """
        Delete the user

        Raises:
            UserNotFoundError: If no such user exists
        """
        deleted = await self.user_repository.delete(user_id)
        if not deleted:
            raise UserNotFoundError(user_id)

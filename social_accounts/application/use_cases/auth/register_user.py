# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.exceptions import DuplicateEmailError
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        The plaintext password is staged on the record; the repository
        validates and hashes it before the document is written.

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            DuplicateEmailError: If user with email already exists
            InvalidCredential: If the password breaks the password policy
            UserValidationError: If name or email are invalid
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateEmailError(request.email)

        # Create domain user entity
        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            name=request.name,
            about=request.about,
        )
        new_user.set_password(request.password)

        # Save user
        result = await self.user_repository.save(new_user)

        return UserResponse.from_user(result.user)

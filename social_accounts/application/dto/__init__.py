from .auth_dto import UserRegistrationRequest, UserLoginRequest, PasswordChangeRequest
from .profile_dto import ProfileUpdateRequest
from .user_dto import UserResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "PasswordChangeRequest",
    "ProfileUpdateRequest",
    "UserResponse",
]

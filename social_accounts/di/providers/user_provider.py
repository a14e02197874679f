from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...application.use_cases.user.follow_user import FollowUserUseCase
from ...application.use_cases.user.unfollow_user import UnfollowUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """Profile and social graph use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_class in (
            GetUserUseCase,
            UpdateProfileUseCase,
            FollowUserUseCase,
            UnfollowUserUseCase,
            DeleteUserUseCase,
        ):
            # Bind the class now; a bare closure would see only the last one
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(user_repository=container.get(UserRepository))
            )

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password, no photo bytes)

    email is a plain str: stored records are checked by the model's own
    pattern, which accepts addresses EmailStr would refuse.
    """
    id: str
    email: str
    name: str
    about: Optional[str] = None
    created: datetime
    updated: Optional[datetime] = None
    following: List[str] = []
    followers: List[str] = []
    has_photo: bool = False

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            email=user.email,
            name=user.name,
            about=user.about,
            created=user.created,
            updated=user.updated,
            following=list(user.following),
            followers=list(user.followers),
            has_photo=bool(user.photo),
        )

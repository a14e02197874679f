from typing import Optional

from pydantic import BaseModel, Field


class ProfileUpdateRequest(BaseModel):
    """DTO for profile update request; unset fields are left unchanged"""
    name: Optional[str] = Field(default=None, max_length=200)
    about: Optional[str] = Field(default=None, max_length=2000)
    photo: Optional[bytes] = None
    photo_content_type: Optional[str] = None
    remove_photo: bool = False

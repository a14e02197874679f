from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# Password length policy is enforced by the credential manager on save,
# so request DTOs only cap the size.


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(max_length=200)
    email: EmailStr
    password: str = Field(max_length=256)
    about: Optional[str] = Field(default=None, max_length=2000)


class UserLoginRequest(BaseModel):
    """DTO for sign-in request"""
    email: EmailStr
    password: str = Field(max_length=256)


class PasswordChangeRequest(BaseModel):
    """DTO for password change request"""
    current_password: str = Field(max_length=256)
    new_password: str = Field(max_length=256)

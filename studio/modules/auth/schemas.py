from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from studio.modules.users.schemas import UserResponse

MIN_PASSWORD_LENGTH = 6


class SignInRequest(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class SignUpRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[EmailStr] = None
    password: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")


class AuthResponse(BaseModel):
    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    message: str

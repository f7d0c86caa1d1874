from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from learnhub.models import UserRole, User


class UserCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    role: UserRole = UserRole.student


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    @staticmethod
    def from_user(user: User | None) -> Optional['UserResponse']:
        if user is None:
            return None
        return UserResponse.model_validate(user)


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse

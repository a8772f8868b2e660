from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict


class UserCreateRequest(BaseModel):
    """Body of POST /api/users. Presence and types are checked by the service, not here."""

    name: Any = None
    phone: Any = None
    email: Any = None


class UserResponse(BaseModel):
    """A persisted user row"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    is_active: bool
    created_at: datetime


class UserCreatedResponse(BaseModel):
    message: str
    user: UserResponse


class UserListResponse(BaseModel):
    users: List[UserResponse] = []


class RootResponse(BaseModel):
    message: str

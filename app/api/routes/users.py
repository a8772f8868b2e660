from fastapi import APIRouter, Depends

from app.config.dependencies import get_user_service
from app.schemas.user import UserCreatedResponse, UserCreateRequest, UserListResponse
from app.services.user.service import UserService

users_router = APIRouter()


@users_router.post("/users", response_model=UserCreatedResponse, status_code=201)
def create_user(request: UserCreateRequest | None = None, user_service: UserService = Depends(get_user_service)):
    # A request without a body is treated as an empty object
    user = user_service.create_user(request or UserCreateRequest())
    return UserCreatedResponse(message="User created successfully", user=user)


@users_router.get("/users", response_model=UserListResponse)
def list_users(user_service: UserService = Depends(get_user_service)):
    """All users, newest first."""
    return UserListResponse(users=user_service.list_users())

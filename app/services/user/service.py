import re
from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError

from app.config.logger import get_logger
from app.schemas.exceptions import InternalError, ValidationError
from app.schemas.user import UserCreateRequest, UserResponse
from app.services.user.repository import UserRepository

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _is_blank(value: Any) -> bool:
    """Missing, null, empty text, zero and false all count as not provided. Objects and arrays do not."""
    if isinstance(value, (str, int, float)):
        return not value
    return value is None


def validate_user_request(request: UserCreateRequest) -> None:
    """Raise ValidationError unless name, phone and a well-formed email are all present.

    phone may be any non-empty JSON value since it is never stored. name must be text or a number.
    """
    if _is_blank(request.name) or _is_blank(request.phone) or _is_blank(request.email):
        raise ValidationError("Name, phone, and email are required")

    if not isinstance(request.email, str) or not EMAIL_PATTERN.fullmatch(request.email):
        raise ValidationError("Please provide a valid email address", {"email": request.email})

    if isinstance(request.name, bool) or not isinstance(request.name, (str, int, float)):
        raise ValidationError("Name must be a string", {"name": request.name})


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create_user(self, request: UserCreateRequest) -> UserResponse:
        validate_user_request(request)

        # phone is required above but the users table has no column for it
        try:
            db_user = self.repository.create_user(username=str(request.name), email=request.email)
        except SQLAlchemyError as e:
            logger.exception("Error creating user")
            raise InternalError({"reason": type(e).__name__}) from e

        logger.info("User created with id: %s", db_user.id)
        return UserResponse.model_validate(db_user)

    def list_users(self) -> List[UserResponse]:
        try:
            db_users = self.repository.list_users()
        except SQLAlchemyError as e:
            logger.exception("Error fetching users")
            raise InternalError({"reason": type(e).__name__}) from e
        return [UserResponse.model_validate(user) for user in db_users]

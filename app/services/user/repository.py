from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models import UserDB


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_user(self, username: str, email: str) -> UserDB:
        db_user = UserDB(
            username=username,
            email=email,
            is_active=True,
        )
        try:
            self.db.add(db_user)
            self.db.commit()
            self.db.refresh(db_user)
        except Exception:
            self.db.rollback()
            raise
        return db_user

    def list_users(self) -> List[UserDB]:
        """All users, newest first. Ties on created_at fall back to insertion order."""
        statement = select(UserDB).order_by(UserDB.created_at.desc(), UserDB.id.desc())
        return list(self.db.scalars(statement).all())

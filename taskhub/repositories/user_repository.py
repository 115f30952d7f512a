# taskhub/repositories/user_repository.py
import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taskhub.errors import ErrorCode, conflict, database_error, not_found
from taskhub.models.user import User
from taskhub.repositories.base import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class UserRepository(SQLAlchemyRepository):
    def create_user(self, email: str, password_hash: str, name: str = "") -> User:
        user = User(email=email, password_hash=password_hash, name=name or "")
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # email is the only unique column a new user can collide on
            self.db.rollback()
            logger.info(f"Signup rejected, email already registered: {email}")
            raise conflict(ErrorCode.EMAIL_EXISTS, "email already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"failed to create user: {e}")
            raise database_error("failed to create user", e)
        self.db.refresh(user)
        return user

    def get_user_by_id(self, user_id: str) -> User:
        with self.translate_errors("failed to get user"):
            user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise not_found(ErrorCode.USER_NOT_FOUND, "user not found")
        return user

    def get_user_by_email(self, email: str) -> User:
        with self.translate_errors("failed to get user"):
            user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise not_found(ErrorCode.USER_NOT_FOUND, "user not found")
        return user

    def update_user(self, user_id: str, name: str) -> User:
        user = self.get_user_by_id(user_id)
        user.name = name
        self.commit("failed to update user")
        self.db.refresh(user)
        return user

    def list_users(self) -> List[User]:
        with self.translate_errors("failed to list users"):
            return self.db.query(User).order_by(User.email.asc()).all()

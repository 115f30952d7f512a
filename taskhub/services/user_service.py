# taskhub/services/user_service.py
import logging
from typing import Any, Dict, List, Tuple

from taskhub.errors import ErrorCode, auth_error
from taskhub.models.user import User
from taskhub.repositories.interfaces import UserStore
from taskhub.utils.security import TokenManager, hash_password, verify_password
from taskhub.utils.validation import validate_email, validate_password, validate_user_name

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserStore, tokens: TokenManager):
        self.users = users
        self.tokens = tokens

    def sign_up(self, email: str, password: str, name: str = "") -> Tuple[User, str]:
        email = (email or "").strip()
        logger.info(f"Starting signup for email: {email}")

        validate_email(email)
        validate_password(password)
        validate_user_name(name)

        user = self.users.create_user(email, hash_password(password), (name or "").strip())
        token = self.tokens.create_access_token(user.id, user.email)

        logger.info(f"Signup successful for user: {user.id}")
        return user, token

    def login(self, email: str, password: str) -> Tuple[User, str]:
        email = (email or "").strip()
        validate_email(email)

        user = self.users.get_user_by_email(email)
        if not verify_password(user.password_hash, password or ""):
            logger.info(f"Login rejected for user {user.id}: wrong password")
            raise auth_error(ErrorCode.INVALID_PASSWORD, "invalid password")

        return user, self.tokens.create_access_token(user.id, user.email)

    def get_profile(self, user_id: str) -> User:
        return self.users.get_user_by_id(user_id)

    def update_profile(self, user_id: str, fields: Dict[str, Any]) -> User:
        """Only the name is editable; an absent or null name leaves the profile unchanged"""
        name = fields.get("name")
        if name is None:
            return self.users.get_user_by_id(user_id)

        validate_user_name(name)
        return self.users.update_user(user_id, name.strip())

    def list_users(self) -> List[User]:
        return self.users.list_users()

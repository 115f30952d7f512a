# taskhub/utils/security.py
# Password hashing (bcrypt) and bearer token issuing/validation (JWT via python-jose)

import base64
import hashlib
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from taskhub.errors import ErrorCode, auth_error, internal_error

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
TOKEN_EXPIRATION = timedelta(hours=24)


def _prehash(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; a fixed-size digest keeps long passwords distinct
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    try:
        hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except (ValueError, TypeError) as e:
        raise internal_error("failed to hash password", e)
    return hashed.decode("utf-8")


def verify_password(hashed_password: str, password: str) -> bool:
    """bcrypt.checkpw compares in constant time"""
    try:
        return bcrypt.checkpw(_prehash(password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        logger.warning("Stored password hash is malformed")
        return False


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenManager:
    """Issues and validates HMAC-signed bearer tokens"""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = TOKEN_EXPIRATION):
        if not algorithm.startswith("HS"):
            raise ValueError(f"Token algorithm must be an HMAC scheme, got {algorithm}")
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def create_access_token(self, user_id: str, email: str, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "user_id": user_id,
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        try:
            return jwt.encode(payload, self.secret, algorithm=self.algorithm)
        except JWTError as e:
            raise internal_error("failed to sign token", e)

    def decode_access_token(self, token: str) -> TokenClaims:
        try:
            # Restricting algorithms rejects tokens that claim "none" or an asymmetric scheme
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise auth_error(ErrorCode.TOKEN_EXPIRED, "token has expired")
        except JWTError:
            raise auth_error(ErrorCode.INVALID_TOKEN, "invalid token")

        user_id = payload.get("user_id") or payload.get("sub")
        email = payload.get("email")
        exp = payload.get("exp")
        if not user_id or not email or exp is None:
            raise auth_error(ErrorCode.INVALID_TOKEN, "token is missing required claims")

        iat = payload.get("iat", exp - int(self.ttl.total_seconds()))
        return TokenClaims(
            user_id=str(user_id),
            email=email,
            issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )

# taskhub/utils/auth.py
from typing import Optional

from fastapi import Depends, Request

from taskhub.errors import ErrorCode, auth_error
from taskhub.utils.security import TokenClaims, TokenManager


def get_token_manager(request: Request) -> TokenManager:
    return request.app.state.token_manager


def claims_from_header(header: Optional[str], tokens: TokenManager) -> TokenClaims:
    if not header:
        raise auth_error(ErrorCode.UNAUTHORIZED, "authorization header is required")

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise auth_error(ErrorCode.UNAUTHORIZED, "invalid authorization header format")

    return tokens.decode_access_token(parts[1])


def get_current_claims(request: Request, tokens: TokenManager = Depends(get_token_manager)) -> TokenClaims:
    """Requires ``Authorization: Bearer <token>`` and exposes the caller on request.state"""
    claims = claims_from_header(request.headers.get("Authorization"), tokens)
    request.state.user_id = claims.user_id
    request.state.user_email = claims.email
    return claims


def get_current_user_id(claims: TokenClaims = Depends(get_current_claims)) -> str:
    return claims.user_id

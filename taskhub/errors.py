# taskhub/errors.py
"""Application error taxonomy.

Every failure that reaches a client is an ``AppError`` carrying a stable,
machine-readable ``code``. The HTTP status is derived from the code, so
services and repositories never deal with status numbers directly.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    # Validation
    INVALID_INPUT = "invalid_input"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    EMPTY_TITLE = "empty_title"
    EMPTY_NAME = "empty_name"
    EMPTY_CONTENT = "empty_content"
    INVALID_STATUS = "invalid_status"
    INVALID_PRIORITY = "invalid_priority"

    # Authentication / authorization
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"
    INVALID_PASSWORD = "invalid_password"

    # Missing resources
    USER_NOT_FOUND = "user_not_found"
    PROJECT_NOT_FOUND = "project_not_found"
    TASK_NOT_FOUND = "task_not_found"
    COMMENT_NOT_FOUND = "comment_not_found"

    # Conflicts
    EMAIL_EXISTS = "email_already_exists"
    INVALID_TRANSITION = "invalid_status_transition"

    # Routing
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"

    # Server
    INTERNAL = "internal_server_error"
    DATABASE_ERROR = "database_error"


_STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.INVALID_EMAIL: 400,
    ErrorCode.WEAK_PASSWORD: 400,
    ErrorCode.EMPTY_TITLE: 400,
    ErrorCode.EMPTY_NAME: 400,
    ErrorCode.EMPTY_CONTENT: 400,
    ErrorCode.INVALID_STATUS: 400,
    ErrorCode.INVALID_PRIORITY: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.TOKEN_EXPIRED: 401,
    ErrorCode.INVALID_PASSWORD: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.USER_NOT_FOUND: 404,
    ErrorCode.PROJECT_NOT_FOUND: 404,
    ErrorCode.TASK_NOT_FOUND: 404,
    ErrorCode.COMMENT_NOT_FOUND: 404,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.METHOD_NOT_ALLOWED: 405,
    ErrorCode.EMAIL_EXISTS: 409,
    ErrorCode.INVALID_TRANSITION: 409,
}


class AppError(Exception):
    def __init__(self, code: ErrorCode, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.cause = cause

    @property
    def status_code(self) -> int:
        return _STATUS_BY_CODE.get(self.code, 500)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"[{self.code.value}] {self.message}: {self.cause}"
        return f"[{self.code.value}] {self.message}"


def validation_error(code: ErrorCode, message: str) -> AppError:
    return AppError(code, message)


def auth_error(code: ErrorCode, message: str) -> AppError:
    return AppError(code, message)


def not_found(code: ErrorCode, message: str) -> AppError:
    return AppError(code, message)


def conflict(code: ErrorCode, message: str) -> AppError:
    return AppError(code, message)


def forbidden(message: str = "you do not have permission to modify this resource") -> AppError:
    return AppError(ErrorCode.FORBIDDEN, message)


def internal_error(message: str, cause: Optional[BaseException] = None) -> AppError:
    return AppError(ErrorCode.INTERNAL, message, cause)


def database_error(message: str, cause: Optional[BaseException] = None) -> AppError:
    return AppError(ErrorCode.DATABASE_ERROR, message, cause)


def code_for_status(status_code: int) -> ErrorCode:
    """Best matching code for an HTTP status raised outside the service layer"""
    if status_code == 401:
        return ErrorCode.UNAUTHORIZED
    if status_code == 403:
        return ErrorCode.FORBIDDEN
    if status_code == 404:
        return ErrorCode.NOT_FOUND
    if status_code == 405:
        return ErrorCode.METHOD_NOT_ALLOWED
    if 400 <= status_code < 500:
        return ErrorCode.INVALID_INPUT
    return ErrorCode.INTERNAL

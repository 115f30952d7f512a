# taskhub/utils/validation.py
"""Field validators.

Each validator returns ``None`` for a valid value and raises an ``AppError``
with a stable code otherwise. They never touch storage.
"""

from typing import Mapping, Optional, Set

from email_validator import EmailNotValidError
from email_validator import validate_email as check_email_syntax

from taskhub.errors import ErrorCode, validation_error
from taskhub.models.task import TaskPriority, TaskStatus

EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128
NAME_MAX_LENGTH = 255
TITLE_MAX_LENGTH = 255
PROJECT_DESCRIPTION_MAX_LENGTH = 1000
TASK_DESCRIPTION_MAX_LENGTH = 2000
COMMENT_MAX_LENGTH = 3000

VALID_STATUSES = {s.value for s in TaskStatus}
VALID_PRIORITIES = {p.value for p in TaskPriority}

# Every state may move to every state, including itself.
# TaskService accepts a replacement table if the workflow ever needs to be stricter.
DEFAULT_STATUS_TRANSITIONS: Mapping[str, Set[str]] = {
    TaskStatus.OPEN.value: {TaskStatus.OPEN.value, TaskStatus.IN_PROGRESS.value, TaskStatus.DONE.value},
    TaskStatus.IN_PROGRESS.value: {TaskStatus.OPEN.value, TaskStatus.IN_PROGRESS.value, TaskStatus.DONE.value},
    TaskStatus.DONE.value: {TaskStatus.OPEN.value, TaskStatus.IN_PROGRESS.value, TaskStatus.DONE.value},
}


def validate_email(email: Optional[str]) -> None:
    email = (email or "").strip()
    if not email:
        raise validation_error(ErrorCode.INVALID_EMAIL, "email cannot be empty")
    if len(email) > EMAIL_MAX_LENGTH:
        raise validation_error(ErrorCode.INVALID_EMAIL, "email is too long")
    try:
        check_email_syntax(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise validation_error(ErrorCode.INVALID_EMAIL, f"invalid email format: {e}")


def validate_password(password: Optional[str]) -> None:
    password = password or ""
    if len(password) < PASSWORD_MIN_LENGTH:
        raise validation_error(
            ErrorCode.WEAK_PASSWORD, f"password must be at least {PASSWORD_MIN_LENGTH} characters"
        )
    if len(password) > PASSWORD_MAX_LENGTH:
        raise validation_error(ErrorCode.WEAK_PASSWORD, "password is too long")


def validate_user_name(name: Optional[str]) -> None:
    if name is not None and len(name) > NAME_MAX_LENGTH:
        raise validation_error(ErrorCode.INVALID_INPUT, f"name must not exceed {NAME_MAX_LENGTH} characters")


def validate_project_name(name: Optional[str]) -> None:
    name = (name or "").strip()
    if not name:
        raise validation_error(ErrorCode.EMPTY_NAME, "project name cannot be empty")
    if len(name) > NAME_MAX_LENGTH:
        raise validation_error(ErrorCode.EMPTY_NAME, "project name is too long")


def validate_project_description(description: Optional[str]) -> None:
    if description and len(description) > PROJECT_DESCRIPTION_MAX_LENGTH:
        raise validation_error(
            ErrorCode.INVALID_INPUT,
            f"description must not exceed {PROJECT_DESCRIPTION_MAX_LENGTH} characters",
        )


def validate_task_title(title: Optional[str]) -> None:
    title = (title or "").strip()
    if not title:
        raise validation_error(ErrorCode.EMPTY_TITLE, "task title cannot be empty")
    if len(title) > TITLE_MAX_LENGTH:
        raise validation_error(ErrorCode.EMPTY_TITLE, "task title is too long")


def validate_task_description(description: Optional[str]) -> None:
    if description and len(description) > TASK_DESCRIPTION_MAX_LENGTH:
        raise validation_error(
            ErrorCode.INVALID_INPUT,
            f"description must not exceed {TASK_DESCRIPTION_MAX_LENGTH} characters",
        )


def validate_comment_content(content: Optional[str]) -> None:
    content = (content or "").strip()
    if not content:
        raise validation_error(ErrorCode.EMPTY_CONTENT, "comment content cannot be empty")
    if len(content) > COMMENT_MAX_LENGTH:
        raise validation_error(
            ErrorCode.INVALID_INPUT, f"comment content must not exceed {COMMENT_MAX_LENGTH} characters"
        )


def validate_status(status: Optional[str]) -> None:
    if status not in VALID_STATUSES:
        raise validation_error(
            ErrorCode.INVALID_STATUS,
            f"invalid task status, must be one of: {', '.join(s.value for s in TaskStatus)}",
        )


def validate_priority(priority: Optional[str]) -> None:
    if priority not in VALID_PRIORITIES:
        raise validation_error(
            ErrorCode.INVALID_PRIORITY,
            f"invalid task priority, must be one of: {', '.join(p.value for p in TaskPriority)}",
        )


def validate_status_transition(
    current: str,
    new: str,
    transitions: Mapping[str, Set[str]] = DEFAULT_STATUS_TRANSITIONS,
) -> None:
    allowed = transitions.get(current)
    if allowed is None or new not in allowed:
        raise validation_error(
            ErrorCode.INVALID_TRANSITION, f"cannot move task from {current} to {new}"
        )

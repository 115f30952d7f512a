# taskhub/services/task_service.py
"""Task lifecycle and assignment rules.

Tasks start OPEN. Status, priority and assignee are independent of each other
and can each be patched without resending the rest of the task. Assigning
records who made the assignment; unassigning clears both fields.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Set

from taskhub.errors import ErrorCode, not_found, validation_error
from taskhub.models.task import Task, TaskPriority, TaskStatus
from taskhub.repositories.interfaces import TaskStore
from taskhub.utils.pagination import DEFAULT_PAGE_SIZE, SMALL_PAGE_SIZE, PageResult, Pagination
from taskhub.utils.validation import (
    DEFAULT_STATUS_TRANSITIONS,
    validate_priority,
    validate_status,
    validate_status_transition,
    validate_task_description,
    validate_task_title,
)

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, tasks: TaskStore, transitions: Mapping[str, Set[str]] = DEFAULT_STATUS_TRANSITIONS):
        self.tasks = tasks
        self.transitions = transitions

    def create_task(
        self,
        project_id: str,
        created_by_id: str,
        title: str,
        description: Optional[str] = "",
        priority: Optional[str] = None,
        assignee_id: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        priority = priority or TaskPriority.MEDIUM.value
        validate_task_title(title)
        validate_task_description(description)
        validate_priority(priority)

        return self.tasks.create_task(
            project_id,
            created_by_id,
            title.strip(),
            description or "",
            TaskStatus.OPEN.value,
            priority,
            assignee_id or None,
            due_date,
        )

    def get_task(self, task_id: str, project_id: Optional[str] = None) -> Task:
        """With project_id set, a task from another project is reported as missing"""
        task = self.tasks.get_task_by_id(task_id)
        if project_id is not None and task.project_id != project_id:
            raise not_found(ErrorCode.TASK_NOT_FOUND, "task not found")
        return task

    def _validate_filters(self, status: Optional[str], priority: Optional[str]):
        status = status or None
        priority = priority or None
        if status is not None:
            validate_status(status)
        if priority is not None:
            validate_priority(priority)
        return status, priority

    def list_tasks(
        self,
        project_id: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> PageResult[Task]:
        status, priority = self._validate_filters(status, priority)
        pagination = Pagination.clamp(page, page_size, DEFAULT_PAGE_SIZE)
        items, total = self.tasks.list_tasks_by_project(
            project_id, pagination.limit, pagination.offset, status, priority
        )
        return PageResult(items=items, total=total, pagination=pagination)

    def list_assigned_tasks(
        self,
        user_id: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> PageResult[Task]:
        status, priority = self._validate_filters(status, priority)
        pagination = Pagination.clamp(page, page_size, SMALL_PAGE_SIZE)
        items, total = self.tasks.list_tasks_by_assignee(
            user_id, pagination.limit, pagination.offset, status, priority
        )
        return PageResult(items=items, total=total, pagination=pagination)

    def update_task(
        self,
        task_id: str,
        fields: Dict[str, Any],
        acting_user_id: str,
        project_id: Optional[str] = None,
    ) -> Task:
        """Applies only the fields present in ``fields``.

        title/status/priority: None means "not supplied".
        description: None clears it to "".
        due_date: None clears it.
        assignee_id: a value assigns (acting user recorded), None or "" unassigns.
        """
        changes: Dict[str, Any] = {}

        if fields.get("title") is not None:
            validate_task_title(fields["title"])
            changes["title"] = fields["title"].strip()
        if "description" in fields:
            validate_task_description(fields["description"])
            changes["description"] = fields["description"] or ""
        if fields.get("status") is not None:
            validate_status(fields["status"])
            changes["status"] = fields["status"]
        if fields.get("priority") is not None:
            validate_priority(fields["priority"])
            changes["priority"] = fields["priority"]
        if "due_date" in fields:
            changes["due_date"] = fields["due_date"]

        current = self.get_task(task_id, project_id)
        if "status" in changes:
            validate_status_transition(current.status, changes["status"], self.transitions)

        # assignment first: it is the step that can still fail on a missing user
        if "assignee_id" in fields:
            self._apply_assignee(task_id, fields["assignee_id"], acting_user_id)
        if changes:
            self.tasks.update_task(task_id, changes)

        return self.tasks.get_task_by_id(task_id)

    def update_status(self, task_id: str, status: Optional[str], project_id: Optional[str] = None) -> Task:
        validate_status(status)
        current = self.get_task(task_id, project_id)
        validate_status_transition(current.status, status, self.transitions)
        return self.tasks.update_task(task_id, {"status": status})

    def update_priority(self, task_id: str, priority: Optional[str], project_id: Optional[str] = None) -> Task:
        validate_priority(priority)
        self.get_task(task_id, project_id)
        return self.tasks.update_task(task_id, {"priority": priority})

    def _apply_assignee(self, task_id: str, assignee_id: Optional[str], acting_user_id: str) -> Task:
        if assignee_id:
            return self.tasks.assign_task(task_id, assignee_id, acting_user_id)
        return self.tasks.unassign_task(task_id)

    def set_assignee(
        self, task_id: str, assignee_id: Optional[str], acting_user_id: str, project_id: Optional[str] = None
    ) -> Task:
        self.get_task(task_id, project_id)
        return self._apply_assignee(task_id, assignee_id, acting_user_id)

    def assign_task(
        self, task_id: str, user_id: Optional[str], assigned_by_id: str, project_id: Optional[str] = None
    ) -> Task:
        if not user_id or not assigned_by_id:
            raise validation_error(ErrorCode.INVALID_INPUT, "user_id is required")
        self.get_task(task_id, project_id)
        task = self.tasks.assign_task(task_id, user_id, assigned_by_id)
        logger.info(f"Task {task_id} assigned to {user_id} by {assigned_by_id}")
        return task

    def unassign_task(self, task_id: str, project_id: Optional[str] = None) -> Task:
        self.get_task(task_id, project_id)
        return self.tasks.unassign_task(task_id)

    def delete_task(self, task_id: str, project_id: Optional[str] = None) -> None:
        self.get_task(task_id, project_id)
        self.tasks.delete_task(task_id)
        logger.info(f"Task {task_id} deleted")

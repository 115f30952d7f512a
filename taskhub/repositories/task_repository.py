# taskhub/repositories/task_repository.py
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import joinedload

from taskhub.errors import ErrorCode, not_found
from taskhub.models.project import Project
from taskhub.models.task import Task, TaskAssignment
from taskhub.models.user import User
from taskhub.repositories.base import SQLAlchemyRepository

UPDATABLE_FIELDS = {"title", "description", "status", "priority", "due_date"}


class TaskRepository(SQLAlchemyRepository):
    def _query(self):
        return self.db.query(Task).options(
            joinedload(Task.assignee),
            joinedload(Task.assigned_by),
            joinedload(Task.created_by),
        )

    def _ensure_project(self, project_id: str) -> None:
        with self.translate_errors("failed to get project"):
            exists = self.db.query(Project.id).filter(Project.id == project_id).first()
        if exists is None:
            raise not_found(ErrorCode.PROJECT_NOT_FOUND, "project not found")

    def _ensure_user(self, user_id: str) -> None:
        with self.translate_errors("failed to get user"):
            exists = self.db.query(User.id).filter(User.id == user_id).first()
        if exists is None:
            raise not_found(ErrorCode.USER_NOT_FOUND, "user not found")

    def _record_assignment(self, task: Task, user_id: str, assigned_by_id: Optional[str]) -> None:
        task.assignee_id = user_id
        task.assigned_by_id = assigned_by_id
        self.db.add(TaskAssignment(task_id=task.id, user_id=user_id, assigned_by_id=assigned_by_id))

    def _filtered(self, query, status: Optional[str], priority: Optional[str]):
        if status:
            query = query.filter(Task.status == status)
        if priority:
            query = query.filter(Task.priority == priority)
        return query

    def create_task(
        self,
        project_id: str,
        created_by_id: str,
        title: str,
        description: str,
        status: str,
        priority: str,
        assignee_id: Optional[str],
        due_date: Optional[datetime],
    ) -> Task:
        self._ensure_project(project_id)
        if assignee_id:
            self._ensure_user(assignee_id)

        task = Task(
            project_id=project_id,
            created_by_id=created_by_id,
            title=title,
            description=description or "",
            status=status,
            priority=priority,
            due_date=due_date,
        )
        with self.translate_errors("failed to create task"):
            self.db.add(task)
            self.db.flush()
            if assignee_id:
                self._record_assignment(task, assignee_id, created_by_id)
            self.db.commit()

        # re-read so the user summaries are populated
        return self.get_task_by_id(task.id)

    def get_task_by_id(self, task_id: str) -> Task:
        with self.translate_errors("failed to get task"):
            task = self._query().filter(Task.id == task_id).first()
        if task is None:
            raise not_found(ErrorCode.TASK_NOT_FOUND, "task not found")
        return task

    def list_tasks_by_project(
        self, project_id: str, limit: int, offset: int, status: Optional[str] = None, priority: Optional[str] = None
    ) -> Tuple[List[Task], int]:
        self._ensure_project(project_id)
        with self.translate_errors("failed to list tasks"):
            base = self._filtered(self.db.query(Task).filter(Task.project_id == project_id), status, priority)
            total = base.count()
            tasks = (
                self._filtered(self._query().filter(Task.project_id == project_id), status, priority)
                .order_by(Task.created_at.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        return tasks, total

    def list_tasks_by_assignee(
        self, user_id: str, limit: int, offset: int, status: Optional[str] = None, priority: Optional[str] = None
    ) -> Tuple[List[Task], int]:
        with self.translate_errors("failed to list assigned tasks"):
            base = self._filtered(self.db.query(Task).filter(Task.assignee_id == user_id), status, priority)
            total = base.count()
            tasks = (
                self._filtered(self._query().filter(Task.assignee_id == user_id), status, priority)
                .order_by(Task.created_at.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        return tasks, total

    def update_task(self, task_id: str, changes: Dict[str, Any]) -> Task:
        task = self.get_task_by_id(task_id)
        for field, value in changes.items():
            if field not in UPDATABLE_FIELDS:
                raise ValueError(f"{field} cannot be updated through update_task")
            setattr(task, field, value)
        self.commit("failed to update task")
        return self.get_task_by_id(task_id)

    def assign_task(self, task_id: str, user_id: str, assigned_by_id: str) -> Task:
        task = self.get_task_by_id(task_id)
        self._ensure_user(user_id)
        with self.translate_errors("failed to assign task"):
            self._record_assignment(task, user_id, assigned_by_id)
            self.db.commit()
        return self.get_task_by_id(task_id)

    def unassign_task(self, task_id: str) -> Task:
        task = self.get_task_by_id(task_id)
        task.assignee_id = None
        task.assigned_by_id = None
        self.commit("failed to unassign task")
        return self.get_task_by_id(task_id)

    def delete_task(self, task_id: str) -> None:
        task = self.get_task_by_id(task_id)
        with self.translate_errors("failed to delete task"):
            self.db.delete(task)
            self.db.commit()

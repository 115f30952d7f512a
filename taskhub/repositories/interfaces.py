# taskhub/repositories/interfaces.py
"""Storage capabilities the services depend on.

The SQLAlchemy repositories implement these, and so does anything else that
needs to stand in for storage (the in-memory fakes in the test suite, for one).
Implementations raise ``AppError`` (``*_not_found``, ``email_already_exists``,
``database_error``), never driver exceptions.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Tuple

from taskhub.models import Comment, Project, Task, User


class UserStore(Protocol):
    def create_user(self, email: str, password_hash: str, name: str = "") -> User: ...

    def get_user_by_id(self, user_id: str) -> User: ...

    def get_user_by_email(self, email: str) -> User: ...

    def update_user(self, user_id: str, name: str) -> User: ...

    def list_users(self) -> List[User]: ...


class ProjectStore(Protocol):
    def create_project(self, user_id: str, created_by_id: str, name: str, description: str) -> Project: ...

    def get_project_by_id(self, project_id: str) -> Project: ...

    def list_projects(self, limit: int, offset: int) -> Tuple[List[Project], int]: ...

    def update_project(self, project_id: str, name: str, description: str) -> Project: ...

    def delete_project(self, project_id: str) -> None: ...


class TaskStore(Protocol):
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
    ) -> Task: ...

    def get_task_by_id(self, task_id: str) -> Task: ...

    def list_tasks_by_project(
        self, project_id: str, limit: int, offset: int, status: Optional[str], priority: Optional[str]
    ) -> Tuple[List[Task], int]: ...

    def list_tasks_by_assignee(
        self, user_id: str, limit: int, offset: int, status: Optional[str], priority: Optional[str]
    ) -> Tuple[List[Task], int]: ...

    def update_task(self, task_id: str, changes: Dict[str, Any]) -> Task: ...

    def assign_task(self, task_id: str, user_id: str, assigned_by_id: str) -> Task: ...

    def unassign_task(self, task_id: str) -> Task: ...

    def delete_task(self, task_id: str) -> None: ...


class CommentStore(Protocol):
    def create_comment(self, task_id: str, user_id: str, content: str) -> Comment: ...

    def get_comment_by_id(self, comment_id: str) -> Comment: ...

    def list_comments_by_task(self, task_id: str, limit: int, offset: int) -> Tuple[List[Comment], int]: ...

    def list_recent_comments(self, limit: int, offset: int) -> Tuple[List[Comment], int]: ...

    def update_comment(self, comment_id: str, content: str) -> Comment: ...

    def delete_comment(self, comment_id: str) -> None: ...

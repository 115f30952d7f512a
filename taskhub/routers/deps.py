# taskhub/routers/deps.py
# Per-request service wiring: each service gets repositories bound to the request's session

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from taskhub.database import get_db
from taskhub.repositories import CommentRepository, ProjectRepository, TaskRepository, UserRepository
from taskhub.services import CommentService, ProjectService, TaskService, UserService
from taskhub.utils.auth import get_token_manager
from taskhub.utils.security import TokenManager


def get_user_service(db: Session = Depends(get_db), tokens: TokenManager = Depends(get_token_manager)) -> UserService:
    return UserService(UserRepository(db), tokens)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(ProjectRepository(db))


def get_task_service(request: Request, db: Session = Depends(get_db)) -> TaskService:
    transitions = request.app.state.status_transitions
    if transitions is None:
        return TaskService(TaskRepository(db))
    return TaskService(TaskRepository(db), transitions)


def get_comment_service(db: Session = Depends(get_db)) -> CommentService:
    return CommentService(CommentRepository(db))

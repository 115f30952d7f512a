from .interfaces import UserStore, ProjectStore, TaskStore, CommentStore
from .user_repository import UserRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .comment_repository import CommentRepository

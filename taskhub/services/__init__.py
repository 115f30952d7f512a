from .user_service import UserService
from .project_service import ProjectService
from .task_service import TaskService
from .comment_service import CommentService

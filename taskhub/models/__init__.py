from .user import User
from .project import Project
from .task import Task, TaskAssignment, TaskStatus, TaskPriority
from .comment import Comment

from .common import SuccessResponse, PaginatedResponse, ErrorResponse, HealthResponse
from .user import UserCreate, UserLogin, UserOut, UserBasic, UserUpdate
from .tokens import AuthResponse
from .project import ProjectCreate, ProjectUpdate, ProjectOut
from .task import TaskCreate, TaskUpdate, TaskOut, TaskStatusUpdate, TaskPriorityUpdate, TaskAssigneeUpdate, AssignTaskRequest
from .comment import CommentCreate, CommentUpdate, CommentOut

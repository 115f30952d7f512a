# taskhub/routers/comment.py
from typing import Optional

from fastapi import APIRouter, Depends, status

from taskhub.routers.deps import get_comment_service, get_task_service
from taskhub.schemas import CommentCreate, CommentOut, CommentUpdate, PaginatedResponse, SuccessResponse
from taskhub.services import CommentService, TaskService
from taskhub.utils.auth import get_current_claims, get_current_user_id
from taskhub.utils.pagination import parse_int
from taskhub.utils.responses import paginated_response, success_response

router = APIRouter(dependencies=[Depends(get_current_claims)])
task_comments_router = APIRouter(dependencies=[Depends(get_current_claims)])
project_task_comments_router = APIRouter(dependencies=[Depends(get_current_claims)])


def _comment_payload(comment, message: str) -> dict:
    return success_response(CommentOut.model_validate(comment), message)


def _comment_page(result, message: str) -> dict:
    return paginated_response(result, message, [CommentOut.model_validate(c) for c in result.items])


# /api/comments

@router.get("/recent", response_model=PaginatedResponse[CommentOut])
def list_recent_comments(
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    service: CommentService = Depends(get_comment_service),
):
    result = service.list_recent_comments(parse_int(page), parse_int(page_size))
    return _comment_page(result, "Recent comments retrieved successfully")


@router.get("/{comment_id}", response_model=SuccessResponse[CommentOut])
def get_comment(comment_id: str, service: CommentService = Depends(get_comment_service)):
    return _comment_payload(service.get_comment(comment_id), "Comment retrieved successfully")


@router.put("/{comment_id}", response_model=SuccessResponse[CommentOut])
def update_comment(
    comment_id: str,
    body: CommentUpdate,
    user_id: str = Depends(get_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    comment = service.update_comment(comment_id, user_id, body.content)
    return _comment_payload(comment, "Comment updated successfully")


@router.delete("/{comment_id}", response_model=SuccessResponse)
def delete_comment(
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    service.delete_comment(comment_id, user_id)
    return success_response(None, "Comment deleted successfully")


# /api/tasks/{task_id}/comments

@task_comments_router.post("", response_model=SuccessResponse[CommentOut], status_code=status.HTTP_201_CREATED)
def create_comment(
    task_id: str,
    body: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    comment = service.create_comment(task_id, user_id, body.content)
    return _comment_payload(comment, "Comment created successfully")


@task_comments_router.get("", response_model=PaginatedResponse[CommentOut])
def list_task_comments(
    task_id: str,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    service: CommentService = Depends(get_comment_service),
):
    result = service.list_comments(task_id, parse_int(page), parse_int(page_size))
    return _comment_page(result, "Comments retrieved successfully")


# /api/projects/{project_id}/tasks/{task_id}/comments
# Every route first checks that the task belongs to the project.

@project_task_comments_router.post(
    "", response_model=SuccessResponse[CommentOut], status_code=status.HTTP_201_CREATED
)
def create_project_task_comment(
    project_id: str,
    task_id: str,
    body: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
    service: CommentService = Depends(get_comment_service),
):
    tasks.get_task(task_id, project_id)
    comment = service.create_comment(task_id, user_id, body.content)
    return _comment_payload(comment, "Comment created successfully")


@project_task_comments_router.get("", response_model=PaginatedResponse[CommentOut])
def list_project_task_comments(
    project_id: str,
    task_id: str,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    tasks: TaskService = Depends(get_task_service),
    service: CommentService = Depends(get_comment_service),
):
    tasks.get_task(task_id, project_id)
    result = service.list_comments(task_id, parse_int(page), parse_int(page_size))
    return _comment_page(result, "Comments retrieved successfully")


@project_task_comments_router.get("/{comment_id}", response_model=SuccessResponse[CommentOut])
def get_project_task_comment(
    project_id: str,
    task_id: str,
    comment_id: str,
    tasks: TaskService = Depends(get_task_service),
    service: CommentService = Depends(get_comment_service),
):
    tasks.get_task(task_id, project_id)
    return _comment_payload(service.get_comment(comment_id, task_id), "Comment retrieved successfully")


@project_task_comments_router.put("/{comment_id}", response_model=SuccessResponse[CommentOut])
def update_project_task_comment(
    project_id: str,
    task_id: str,
    comment_id: str,
    body: CommentUpdate,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
    service: CommentService = Depends(get_comment_service),
):
    tasks.get_task(task_id, project_id)
    comment = service.update_comment(comment_id, user_id, body.content, task_id)
    return _comment_payload(comment, "Comment updated successfully")


@project_task_comments_router.delete("/{comment_id}", response_model=SuccessResponse)
def delete_project_task_comment(
    project_id: str,
    task_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
    service: CommentService = Depends(get_comment_service),
):
    tasks.get_task(task_id, project_id)
    service.delete_comment(comment_id, user_id, task_id)
    return success_response(None, "Comment deleted successfully")

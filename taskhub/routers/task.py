# taskhub/routers/task.py
# Task routes live under /api/tasks, with the same operations mirrored under
# /api/projects/{project_id}/tasks where the task must belong to that project.

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from taskhub.routers.deps import get_task_service
from taskhub.schemas import (
    AssignTaskRequest,
    PaginatedResponse,
    SuccessResponse,
    TaskAssigneeUpdate,
    TaskCreate,
    TaskOut,
    TaskPriorityUpdate,
    TaskStatusUpdate,
    TaskUpdate,
)
from taskhub.services import TaskService
from taskhub.utils.auth import get_current_claims, get_current_user_id
from taskhub.utils.pagination import parse_int
from taskhub.utils.responses import paginated_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_claims)])
project_tasks_router = APIRouter(dependencies=[Depends(get_current_claims)])


def _task_payload(task, message: str) -> dict:
    return success_response(TaskOut.model_validate(task), message)


# /api/tasks

@router.get("/assigned", response_model=PaginatedResponse[TaskOut])
def list_assigned_tasks(
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    result = service.list_assigned_tasks(user_id, parse_int(page), parse_int(page_size), status, priority)
    items = [TaskOut.model_validate(t) for t in result.items]
    return paginated_response(result, "Assigned tasks retrieved successfully", items)


@router.get("/{task_id}", response_model=SuccessResponse[TaskOut])
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return _task_payload(service.get_task(task_id), "Task retrieved successfully")


@router.put("/{task_id}", response_model=SuccessResponse[TaskOut])
def update_task(
    task_id: str,
    body: TaskUpdate,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.update_task(task_id, body.present_fields(), user_id)
    return _task_payload(task, "Task updated successfully")


@router.delete("/{task_id}", response_model=SuccessResponse)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id)
    return success_response(None, "Task deleted successfully")


@router.patch("/{task_id}/status", response_model=SuccessResponse[TaskOut])
def update_task_status(task_id: str, body: TaskStatusUpdate, service: TaskService = Depends(get_task_service)):
    task = service.update_status(task_id, body.status)
    return _task_payload(task, "Task status updated successfully")


@router.patch("/{task_id}/priority", response_model=SuccessResponse[TaskOut])
def update_task_priority(task_id: str, body: TaskPriorityUpdate, service: TaskService = Depends(get_task_service)):
    task = service.update_priority(task_id, body.priority)
    return _task_payload(task, "Task priority updated successfully")


@router.patch("/{task_id}/assignee", response_model=SuccessResponse[TaskOut])
def update_task_assignee(
    task_id: str,
    body: TaskAssigneeUpdate,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.set_assignee(task_id, body.assignee_id, user_id)
    return _task_payload(task, "Task assignee updated successfully")


@router.post("/{task_id}/assign", response_model=SuccessResponse[TaskOut])
def assign_task(
    task_id: str,
    body: AssignTaskRequest,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.assign_task(task_id, body.user_id, user_id)
    return _task_payload(task, "Task assigned successfully")


# /api/projects/{project_id}/tasks

@project_tasks_router.post("", response_model=SuccessResponse[TaskOut], status_code=status.HTTP_201_CREATED)
def create_task(
    project_id: str,
    body: TaskCreate,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.create_task(
        project_id,
        user_id,
        body.title,
        body.description,
        body.priority,
        body.assignee_id,
        body.due_date,
    )
    logger.info(f"Task created: {task.id} in project {project_id} by user {user_id}")
    return _task_payload(task, "Task created successfully")


@project_tasks_router.get("", response_model=PaginatedResponse[TaskOut])
def list_project_tasks(
    project_id: str,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    service: TaskService = Depends(get_task_service),
):
    result = service.list_tasks(project_id, parse_int(page), parse_int(page_size), status, priority)
    items = [TaskOut.model_validate(t) for t in result.items]
    return paginated_response(result, "Tasks retrieved successfully", items)


@project_tasks_router.get("/{task_id}", response_model=SuccessResponse[TaskOut])
def get_project_task(project_id: str, task_id: str, service: TaskService = Depends(get_task_service)):
    return _task_payload(service.get_task(task_id, project_id), "Task retrieved successfully")


@project_tasks_router.put("/{task_id}", response_model=SuccessResponse[TaskOut])
def update_project_task(
    project_id: str,
    task_id: str,
    body: TaskUpdate,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.update_task(task_id, body.present_fields(), user_id, project_id)
    return _task_payload(task, "Task updated successfully")


@project_tasks_router.delete("/{task_id}", response_model=SuccessResponse)
def delete_project_task(project_id: str, task_id: str, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id, project_id)
    return success_response(None, "Task deleted successfully")


@project_tasks_router.patch("/{task_id}/status", response_model=SuccessResponse[TaskOut])
def update_project_task_status(
    project_id: str,
    task_id: str,
    body: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service),
):
    task = service.update_status(task_id, body.status, project_id)
    return _task_payload(task, "Task status updated successfully")


@project_tasks_router.patch("/{task_id}/priority", response_model=SuccessResponse[TaskOut])
def update_project_task_priority(
    project_id: str,
    task_id: str,
    body: TaskPriorityUpdate,
    service: TaskService = Depends(get_task_service),
):
    task = service.update_priority(task_id, body.priority, project_id)
    return _task_payload(task, "Task priority updated successfully")


@project_tasks_router.patch("/{task_id}/assignee", response_model=SuccessResponse[TaskOut])
def update_project_task_assignee(
    project_id: str,
    task_id: str,
    body: TaskAssigneeUpdate,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.set_assignee(task_id, body.assignee_id, user_id, project_id)
    return _task_payload(task, "Task assignee updated successfully")


@project_tasks_router.post("/{task_id}/assign", response_model=SuccessResponse[TaskOut])
def assign_project_task(
    project_id: str,
    task_id: str,
    body: AssignTaskRequest,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.assign_task(task_id, body.user_id, user_id, project_id)
    return _task_payload(task, "Task assigned successfully")

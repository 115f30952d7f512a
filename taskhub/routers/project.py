# taskhub/routers/project.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from taskhub.routers.deps import get_project_service
from taskhub.schemas import PaginatedResponse, ProjectCreate, ProjectOut, ProjectUpdate, SuccessResponse
from taskhub.services import ProjectService
from taskhub.utils.auth import get_current_claims, get_current_user_id
from taskhub.utils.pagination import parse_int
from taskhub.utils.responses import paginated_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_claims)])


@router.post("", response_model=SuccessResponse[ProjectOut], status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    project = service.create_project(user_id, body.name, body.description)
    logger.info(f"Project created: {project.name} (ID: {project.id}) by user {user_id}")
    return success_response(ProjectOut.model_validate(project), "Project created successfully")


@router.get("", response_model=PaginatedResponse[ProjectOut])
def list_projects(
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    service: ProjectService = Depends(get_project_service),
):
    result = service.list_projects(parse_int(page), parse_int(page_size))
    items = [ProjectOut.model_validate(p) for p in result.items]
    return paginated_response(result, "Projects retrieved successfully", items)


@router.get("/{project_id}", response_model=SuccessResponse[ProjectOut])
def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    project = service.get_project(project_id)
    return success_response(ProjectOut.model_validate(project), "Project retrieved successfully")


@router.put("/{project_id}", response_model=SuccessResponse[ProjectOut])
def update_project(
    project_id: str,
    body: ProjectUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    project = service.update_project(project_id, user_id, body.model_dump(exclude_unset=True))
    return success_response(ProjectOut.model_validate(project), "Project updated successfully")


@router.delete("/{project_id}", response_model=SuccessResponse)
def delete_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    service.delete_project(project_id, user_id)
    return success_response(None, "Project deleted successfully")

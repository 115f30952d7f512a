# taskhub/services/project_service.py
import logging
from typing import Any, Dict, Optional

from taskhub.errors import forbidden
from taskhub.models.project import Project
from taskhub.repositories.interfaces import ProjectStore
from taskhub.utils.pagination import DEFAULT_PAGE_SIZE, PageResult, Pagination
from taskhub.utils.validation import validate_project_description, validate_project_name

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, projects: ProjectStore):
        self.projects = projects

    def create_project(self, user_id: str, name: str, description: Optional[str] = "") -> Project:
        validate_project_name(name)
        validate_project_description(description)

        # the creator owns the project
        return self.projects.create_project(user_id, user_id, name.strip(), description or "")

    def get_project(self, project_id: str) -> Project:
        return self.projects.get_project_by_id(project_id)

    def list_projects(self, page: Optional[int] = None, page_size: Optional[int] = None) -> PageResult[Project]:
        pagination = Pagination.clamp(page, page_size, DEFAULT_PAGE_SIZE)
        items, total = self.projects.list_projects(pagination.limit, pagination.offset)
        return PageResult(items=items, total=total, pagination=pagination)

    def _owned_project(self, project_id: str, user_id: str) -> Project:
        project = self.projects.get_project_by_id(project_id)
        if project.user_id != user_id:
            logger.warning(f"User {user_id} denied write access to project {project_id}")
            raise forbidden("only the project owner can modify this project")
        return project

    def update_project(self, project_id: str, user_id: str, fields: Dict[str, Any]) -> Project:
        if "name" in fields:
            validate_project_name(fields["name"])
        if "description" in fields:
            validate_project_description(fields["description"])

        project = self._owned_project(project_id, user_id)

        name = fields["name"].strip() if "name" in fields else project.name
        description = (fields["description"] or "") if "description" in fields else project.description
        return self.projects.update_project(project_id, name, description)

    def delete_project(self, project_id: str, user_id: str) -> None:
        self._owned_project(project_id, user_id)
        self.projects.delete_project(project_id)
        logger.info(f"Project {project_id} deleted by user {user_id}")

# taskhub/repositories/project_repository.py
from typing import List, Tuple

from sqlalchemy.orm import joinedload

from taskhub.errors import ErrorCode, not_found
from taskhub.models.project import Project
from taskhub.repositories.base import SQLAlchemyRepository


class ProjectRepository(SQLAlchemyRepository):
    def _query(self):
        return self.db.query(Project).options(joinedload(Project.created_by))

    def create_project(self, user_id: str, created_by_id: str, name: str, description: str) -> Project:
        project = Project(
            user_id=user_id,
            created_by_id=created_by_id,
            name=name,
            description=description or "",
        )
        with self.translate_errors("failed to create project"):
            self.db.add(project)
            self.db.commit()
        return self.get_project_by_id(project.id)

    def get_project_by_id(self, project_id: str) -> Project:
        with self.translate_errors("failed to get project"):
            project = self._query().filter(Project.id == project_id).first()
        if project is None:
            raise not_found(ErrorCode.PROJECT_NOT_FOUND, "project not found")
        return project

    def list_projects(self, limit: int, offset: int) -> Tuple[List[Project], int]:
        """Every project in the shared workspace, newest first"""
        with self.translate_errors("failed to list projects"):
            total = self.db.query(Project).count()
            projects = (
                self._query()
                .order_by(Project.created_at.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        return projects, total

    def update_project(self, project_id: str, name: str, description: str) -> Project:
        project = self.get_project_by_id(project_id)
        project.name = name
        project.description = description or ""
        self.commit("failed to update project")
        return self.get_project_by_id(project_id)

    def delete_project(self, project_id: str) -> None:
        project = self.get_project_by_id(project_id)
        with self.translate_errors("failed to delete project"):
            # tasks (and their comments) go with it: ORM cascade + ON DELETE CASCADE
            self.db.delete(project)
            self.db.commit()

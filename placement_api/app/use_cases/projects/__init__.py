"""
Project Use Cases

Organization-scoped project management.
"""

from .list_projects_use_case import ListProjectsUseCase
from .create_project_use_case import CreateProjectUseCase
from .update_project_use_case import UpdateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import (
    CreateProjectCommand,
    UpdateProjectCommand,
    ProjectResponse,
    DeleteProjectResponse,
)

__all__ = [
    "ListProjectsUseCase",
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "ProjectResponse",
    "DeleteProjectResponse",
]

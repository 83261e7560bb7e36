"""
Project Use Case DTOs (Data Transfer Objects)

Command and Response classes for organization-scoped project management.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from placement_api.domain.entities import Project, ProjectStatus


# ============================================================================
# Command DTOs
# ============================================================================


class ProjectDetails(BaseModel):
    """Optional descriptive fields shared by create and update"""

    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    scheduled_time: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    interns_required: Optional[str] = None
    cgpa_requirement: Optional[str] = None
    discipline: Optional[str] = None
    skills: Optional[str] = None
    coordinator_name: Optional[str] = None
    coordinator_email: Optional[str] = None
    coordinator_alt_email: Optional[str] = None
    coordinator_phone: Optional[str] = None
    coordinator_designation: Optional[str] = None
    guidelines_file_path: Optional[str] = None


class CreateProjectCommand(ProjectDetails):
    project_code: Optional[str] = None
    project_name: Optional[str] = None


class UpdateProjectCommand(ProjectDetails):
    project_code: Optional[str] = None
    project_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectResponse(BaseModel):
    """Project as listed to its organization"""

    id: str
    project_code: str
    project_name: str
    description: str
    status: str
    scheduled_time: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    applications: int

    @classmethod
    def from_entity(cls, project: Project, applications: int) -> "ProjectResponse":
        return cls(
            id=str(project.id),
            project_code=project.project_code,
            project_name=project.project_name,
            description=project.description,
            status=ProjectStatus(project.status).value,
            scheduled_time=project.scheduled_time,
            start_date=project.start_date,
            end_date=project.end_date,
            applications=applications,
        )


class DeleteProjectResponse(BaseModel):
    message: str
    project_id: str

"""
Create Project Use Case

Creates a project owned by the acting organization.
"""

from uuid import UUID

from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.domain.entities import Project, ProjectStatus
from .dates import check_date_range, parse_date
from .dtos import CreateProjectCommand, ProjectResponse

_OPTIONAL_FIELDS = (
    "scheduled_time",
    "interns_required",
    "cgpa_requirement",
    "discipline",
    "skills",
    "coordinator_name",
    "coordinator_email",
    "coordinator_alt_email",
    "coordinator_phone",
    "coordinator_designation",
    "guidelines_file_path",
)


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - project_code and project_name are required
    - Owner is always the authenticated organization, never a body field
    - Status defaults to draft
    - project_code is unique per organization
    - start_date must not be after end_date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organization_id: UUID, command: CreateProjectCommand
    ) -> Result[ProjectResponse]:
        if not command.project_code or not command.project_name:
            return Return.err(
                Error("MISSING_FIELDS", "project_code and project_name are required")
            )

        start = parse_date(command.start_date, "start_date")
        if start.is_err():
            return Return.err(start.error)
        end = parse_date(command.end_date, "end_date")
        if end.is_err():
            return Return.err(end.error)
        date_range = check_date_range(start.value, end.value)
        if date_range.is_err():
            return Return.err(date_range.error)

        async with self.uow:
            existing = await self.uow.projects.get_by_code(organization_id, command.project_code)
            if existing is not None:
                return Return.err(
                    Error("DUPLICATE_PROJECT_CODE", "Project code already exists")
                )

            project = Project(
                organization_id=organization_id,
                project_code=command.project_code,
                project_name=command.project_name,
                description=command.description or "",
                status=command.status or ProjectStatus.draft,
                start_date=start.value,
                end_date=end.value,
                **{field: getattr(command, field) for field in _OPTIONAL_FIELDS},
            )
            project = await self.uow.projects.create(project)
            await self.uow.commit()

            return Return.ok(ProjectResponse.from_entity(project, 0))

"""
Update Project Use Case

Partial update of a project owned by the acting organization.
"""

from uuid import UUID

from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.unit_of_work import UnitOfWork
from .dates import check_date_range, parse_date
from .dtos import ProjectResponse, UpdateProjectCommand

_UPDATABLE_FIELDS = (
    "project_code",
    "project_name",
    "description",
    "status",
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


class UpdateProjectUseCase:
    """
    Use case for updating a project.

    Business Rules:
    - A project of another organization is reported as not found
    - Only provided fields are changed
    - The resulting date range must stay valid
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organization_id: UUID, project_id: UUID, command: UpdateProjectCommand
    ) -> Result[ProjectResponse]:
        start = parse_date(command.start_date, "start_date")
        if start.is_err():
            return Return.err(start.error)
        end = parse_date(command.end_date, "end_date")
        if end.is_err():
            return Return.err(end.error)

        async with self.uow:
            project = await self.uow.projects.get_for_organization(project_id, organization_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if command.project_code and command.project_code != project.project_code:
                clash = await self.uow.projects.get_by_code(organization_id, command.project_code)
                if clash is not None:
                    return Return.err(
                        Error("DUPLICATE_PROJECT_CODE", "Project code already exists")
                    )

            new_start = start.value or project.start_date
            new_end = end.value or project.end_date
            date_range = check_date_range(new_start, new_end)
            if date_range.is_err():
                return Return.err(date_range.error)

            for field in _UPDATABLE_FIELDS:
                value = getattr(command, field)
                if value is not None:
                    setattr(project, field, value)
            project.start_date = new_start
            project.end_date = new_end

            project = await self.uow.projects.update(project)
            counts = await self.uow.applications.count_by_projects([project.id])
            await self.uow.commit()

            return Return.ok(ProjectResponse.from_entity(project, counts.get(project.id, 0)))

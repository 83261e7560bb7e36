from uuid import UUID

from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteProjectResponse


class DeleteProjectUseCase:
    """Deletes an owned project together with its applications"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, organization_id: UUID, project_id: UUID) -> Result[DeleteProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_for_organization(project_id, organization_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            await self.uow.applications.delete_by_project_id(project.id)
            await self.uow.projects.delete(project)
            await self.uow.commit()

            return Return.ok(
                DeleteProjectResponse(
                    message="Project deleted successfully",
                    project_id=str(project_id),
                )
            )

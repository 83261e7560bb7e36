from typing import List
from uuid import UUID

from placement_api.libs.result import Result, Return
from placement_api.app.services.unit_of_work import UnitOfWork
from .dtos import ProjectResponse


class ListProjectsUseCase:
    """Lists the acting organization's projects with their application counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, organization_id: UUID) -> Result[List[ProjectResponse]]:
        async with self.uow:
            projects = await self.uow.projects.list_by_organization(organization_id)
            counts = await self.uow.applications.count_by_projects([p.id for p in projects])

            return Return.ok(
                [ProjectResponse.from_entity(p, counts.get(p.id, 0)) for p in projects]
            )

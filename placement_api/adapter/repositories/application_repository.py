from typing import Dict, List
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.app.repositories.application_repository import IApplicationRepository
from placement_api.domain.entities import Application


class ApplicationRepository(IApplicationRepository):
    """Application repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_by_projects(self, project_ids: List[UUID]) -> Dict[UUID, int]:
        if not project_ids:
            return {}
        stmt = (
            select(Application.project_id, func.count(Application.id))
            .where(Application.project_id.in_(project_ids))
            .group_by(Application.project_id)
        )
        result = await self.session.execute(stmt)
        return {project_id: count for project_id, count in result.all()}

    async def delete_by_project_id(self, project_id: UUID) -> int:
        stmt = delete(Application).where(Application.project_id == project_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

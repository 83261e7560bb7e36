from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.app.repositories.project_repository import IProjectRepository
from placement_api.domain.entities import Project


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_organization(self, organization_id: UUID) -> List[Project]:
        stmt = (
            select(Project)
            .where(Project.organization_id == organization_id)
            .order_by(Project.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_organization(
        self, project_id: UUID, organization_id: UUID
    ) -> Optional[Project]:
        """Ownership is part of the lookup, not a check after it"""
        stmt = select(Project).where(
            Project.id == project_id,
            Project.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_code(self, organization_id: UUID, project_code: str) -> Optional[Project]:
        stmt = select(Project).where(
            Project.organization_id == organization_id,
            Project.project_code == project_code,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """Update existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        await self.session.delete(project)
        await self.session.flush()

from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.app.repositories.organization_repository import IOrganizationRepository
from placement_api.domain.entities import AccountKind, AccountRef, Organization


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_recovery_email(self, email: str) -> Optional[AccountRef]:
        """Match the coordinator's primary or alternate email"""
        stmt = (
            select(Organization)
            .where(
                or_(
                    Organization.coordinator_email == email,
                    Organization.coordinator_alternate_email == email,
                )
            )
            .order_by(Organization.created_at)
        )
        result = await self.session.execute(stmt)
        org = result.scalars().first()
        if org is None:
            return None
        return AccountRef(kind=AccountKind.organization, key=org.username, email=email)

    async def set_password_hash(self, key: str, password_hash: str) -> bool:
        stmt = (
            update(Organization)
            .where(Organization.username == key)
            .values(password_hash=password_hash)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        stmt = select(Organization).where(Organization.id == organization_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[Organization]:
        """Get organization by login username"""
        stmt = select(Organization).where(Organization.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization

from typing import Optional

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.app.repositories.admin_repository import IAdminRepository
from placement_api.domain.entities import AccountKind, AccountRef, Admin


class AdminRepository(IAdminRepository):
    """Admin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_recovery_email(self, email: str) -> Optional[AccountRef]:
        stmt = (
            select(Admin)
            .where(Admin.email_address == email)
            .order_by(Admin.created_at)
        )
        result = await self.session.execute(stmt)
        admin = result.scalars().first()
        if admin is None:
            return None
        return AccountRef(kind=AccountKind.admin, key=admin.admin_id, email=email)

    async def set_password_hash(self, key: str, password_hash: str) -> bool:
        stmt = update(Admin).where(Admin.admin_id == key).values(password_hash=password_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

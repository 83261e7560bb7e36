from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from placement_api.app.repositories.reset_request_repository import IResetRequestRepository
from placement_api.domain.entities import LIVE_RESET_STATUSES, ResetRequest, ResetStatus


class ResetRequestRepository(IResetRequestRepository):
    """
    ResetRequest repository implementation using SQLModel.

    Status changes are single UPDATE statements guarded by the expected
    current status, so the database arbitrates concurrent callers.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: ResetRequest) -> ResetRequest:
        """Create a new reset request"""
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request

    async def delete_by_email(self, email: str) -> int:
        stmt = delete(ResetRequest).where(ResetRequest.email == email)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def get_by_token(self, token: str) -> Optional[ResetRequest]:
        stmt = (
            select(ResetRequest)
            .where(ResetRequest.token == token)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_latest_by_email(self, email: str) -> Optional[ResetRequest]:
        stmt = (
            select(ResetRequest)
            .where(ResetRequest.email == email)
            .order_by(ResetRequest.issued_at.desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def transition(
        self,
        token: str,
        from_statuses: Iterable[ResetStatus],
        to_status: ResetStatus,
        live_at: Optional[datetime] = None,
    ) -> bool:
        conditions = [
            ResetRequest.token == token,
            ResetRequest.status.in_(list(from_statuses)),
        ]
        if live_at is not None:
            conditions.append(ResetRequest.expires_at > live_at)

        stmt = (
            update(ResetRequest)
            .where(*conditions)
            .values(status=to_status)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def expire_if_stale(self, token: str, now: datetime) -> bool:
        stmt = (
            update(ResetRequest)
            .where(
                ResetRequest.token == token,
                ResetRequest.status.in_(list(LIVE_RESET_STATUSES)),
                ResetRequest.expires_at <= now,
            )
            .values(status=ResetStatus.expired)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

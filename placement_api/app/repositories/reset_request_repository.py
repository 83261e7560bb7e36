from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional

from placement_api.domain.entities import ResetRequest, ResetStatus


class IResetRequestRepository(ABC):
    """
    ResetRequest repository interface - application layer.

    Status changes go through conditional updates only. Each returns whether
    this call performed the change, so two racing callers cannot both win.
    """

    @abstractmethod
    async def create(self, request: ResetRequest) -> ResetRequest:
        """Create a new reset request"""
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> int:
        """Delete every request for the email regardless of status"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[ResetRequest]:
        """Get reset request by token, reading current persisted state"""
        pass

    @abstractmethod
    async def get_latest_by_email(self, email: str) -> Optional[ResetRequest]:
        """Get the most recently issued request for the email"""
        pass

    @abstractmethod
    async def transition(
        self,
        token: str,
        from_statuses: Iterable[ResetStatus],
        to_status: ResetStatus,
        live_at: Optional[datetime] = None,
    ) -> bool:
        """
        Atomically move the request to to_status if its current status is one
        of from_statuses and, when live_at is given, its deadline is after
        live_at.
        """
        pass

    @abstractmethod
    async def expire_if_stale(self, token: str, now: datetime) -> bool:
        """Atomically mark a pending/approved request expired once past its deadline"""
        pass

"""
Get Reset Status Use Case

Lets the client poll the latest reset request of an email.
"""

from datetime import datetime
from typing import Callable, Optional

from placement_api.libs.clock import utcnow
from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.domain.entities import AuditEvent
from .dtos import ResetStatusResponse


class GetResetStatusUseCase:
    """
    Use case for polling reset status.

    Business Rules:
    - Reports the most recently issued request for the email
    - A pending/approved request past its deadline is reported (and stored) as expired
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, email: Optional[str]) -> Result[ResetStatusResponse]:
        if not email:
            return Return.err(Error("MISSING_FIELDS", "Email required."))

        async with self.uow:
            reset_request = await self.uow.reset_requests.get_latest_by_email(email)
            if reset_request is None:
                return Return.err(Error("NOT_FOUND", "No reset request found."))

            if await self.uow.reset_requests.expire_if_stale(reset_request.token, self.clock()):
                await self.uow.audit_events.create(
                    AuditEvent(
                        account_kind=reset_request.account_kind,
                        action="password_reset_expired",
                        event_metadata={"email": email},
                    )
                )
                await self.uow.commit()
                reset_request = await self.uow.reset_requests.get_by_token(reset_request.token)

            return Return.ok(
                ResetStatusResponse(
                    token=reset_request.token,
                    status=reset_request.status.value,
                )
            )

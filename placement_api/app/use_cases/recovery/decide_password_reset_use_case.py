"""
Decide Password Reset Use Case

Applies the approve or deny answer given through an emailed link.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from placement_api.libs.clock import utcnow
from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.domain.entities import AuditEvent, ResetDecision, ResetStatus
from .dtos import ResetDecisionResponse

logger = logging.getLogger(__name__)


class DecidePasswordResetUseCase:
    """
    Use case for the approve/deny confirmation links.

    Business Rules:
    - Only a pending, unexpired request can be decided
    - The first decision to leave pending wins; later ones fail with NOT_PENDING
    - A pending or approved request past its deadline becomes expired on this
      access; only a pending one reports the expired link
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, token: Optional[str], decision: ResetDecision
    ) -> Result[ResetDecisionResponse]:
        """
        Errors:
            - MISSING_FIELDS: No token given
            - UNKNOWN_TOKEN: No request carries this token
            - TOKEN_EXPIRED: Pending request past its deadline (now expired)
            - NOT_PENDING: Request was already decided or closed
        """
        if not token:
            return Return.err(Error("MISSING_FIELDS", "Missing token"))

        target = decision.target_status

        async with self.uow:
            now = self.clock()
            won = await self.uow.reset_requests.transition(
                token, [ResetStatus.pending], target, live_at=now
            )

            if won:
                reset_request = await self.uow.reset_requests.get_by_token(token)
                await self.uow.audit_events.create(
                    AuditEvent(
                        account_kind=reset_request.account_kind,
                        action=f"password_reset_{target.value}",
                        event_metadata={"email": reset_request.email},
                    )
                )
                await self.uow.commit()
                logger.info(f"Password reset for {reset_request.email} {target.value}")
                return Return.ok(
                    ResetDecisionResponse(
                        status=target.value,
                        message=(
                            "Request confirmed. You can now reset your password."
                            if decision is ResetDecision.approve
                            else "Reset request denied successfully."
                        ),
                    )
                )

            reset_request = await self.uow.reset_requests.get_by_token(token)

            if reset_request is None:
                return Return.err(Error("UNKNOWN_TOKEN", "Invalid or expired token"))

            current = reset_request.status
            if current in (
                ResetStatus.pending,
                ResetStatus.approved,
            ) and await self.uow.reset_requests.expire_if_stale(token, now):
                await self.uow.audit_events.create(
                    AuditEvent(
                        account_kind=reset_request.account_kind,
                        action="password_reset_expired",
                        event_metadata={"email": reset_request.email},
                    )
                )
                await self.uow.commit()
                if current is ResetStatus.pending:
                    return Return.err(Error("TOKEN_EXPIRED", "Link expired."))
                current = ResetStatus.expired

            return Return.err(
                Error(
                    "NOT_PENDING",
                    f"Reset request is no longer pending. Status: {current.value}",
                )
            )

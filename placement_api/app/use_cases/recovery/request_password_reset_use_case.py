"""
Request Password Reset Use Case

Issues a reset request for a recovery email and emails the approve/deny links.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from placement_api.libs.clock import utcnow
from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.identity_resolver import IdentityResolver
from placement_api.app.services.reset_confirmation_delivery import ResetConfirmationDelivery
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.domain.entities import AuditEvent, ResetRequest, ResetStatus
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for starting a password recovery.

    Business Rules:
    - Email must belong to a student, admin or organization (in that priority)
    - All previous requests for the email are deleted, whatever their status
    - Token is 32 random bytes, hex encoded
    - Request expires ttl_minutes after issuance
    - The request is committed before the email is sent; a delivery failure
      is reported but does not remove the request
    """

    def __init__(
        self,
        uow: UnitOfWork,
        delivery: ResetConfirmationDelivery,
        ttl_minutes: int = 10,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.delivery = delivery
        self.ttl_minutes = ttl_minutes
        self.clock = clock

    async def execute(self, email: Optional[str]) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Recovery email typed by the user

        Returns:
            Result with confirmation message, or Error

        Errors:
            - MISSING_FIELDS: No email given
            - UNKNOWN_IDENTITY: No account owns the email
            - DELIVERY_FAILED: Request stored but the email was not sent
        """
        if not email:
            return Return.err(Error("MISSING_FIELDS", "Email required."))

        async with self.uow:
            account = await IdentityResolver(self.uow).resolve(email)
            if account is None:
                logger.info(f"Password reset requested for unknown email {email}")
                return Return.err(Error("UNKNOWN_IDENTITY", "Email not found."))

            removed = await self.uow.reset_requests.delete_by_email(email)

            now = self.clock()
            reset_request = ResetRequest(
                email=email,
                token=secrets.token_hex(32),
                account_kind=account.kind,
                status=ResetStatus.pending,
                issued_at=now,
                expires_at=now + timedelta(minutes=self.ttl_minutes),
            )
            await self.uow.reset_requests.create(reset_request)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_kind=account.kind,
                    account_key=account.key,
                    action="password_reset_requested",
                    event_metadata={"email": email, "superseded": removed},
                )
            )

            await self.uow.commit()

        logger.info(f"Issued {account.kind.value} password reset for {email}")

        delivered = await self.delivery.deliver(email, account.kind, reset_request.token)
        if delivered.is_err():
            return Return.err(delivered.error)

        return Return.ok(
            RequestPasswordResetResponse(
                message=f"Verification email sent to {account.kind.value} email!",
                account_kind=account.kind.value,
            )
        )

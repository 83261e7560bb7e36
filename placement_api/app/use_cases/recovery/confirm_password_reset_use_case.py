"""
Confirm Password Reset Use Case

Sets the new password once the emailed request has been approved.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from placement_api.libs.clock import utcnow
from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.identity_resolver import IdentityResolver
from placement_api.app.services.passwords import hash_password, validate_new_password
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.domain.entities import AuditEvent, ResetStatus
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for committing a new password with an approved reset token.

    Business Rules:
    - Token and password are both required
    - Password follows the same minimum length policy as profile updates
    - Password is hashed with bcrypt before the request is touched
    - Only an approved, unexpired request can be used, exactly once
    - Claiming the request and writing the hash happen in one transaction
    - If the account vanished since issuance the request is still closed as
      used and the outcome is reported as stale_account
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_min_length: int = 6,
        bcrypt_rounds: int = 12,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.password_min_length = password_min_length
        self.bcrypt_rounds = bcrypt_rounds
        self.clock = clock

    async def execute(
        self, token: Optional[str], new_password: Optional[str]
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Reset token obtained from the status poll
            new_password: New plain text password

        Returns:
            Result with commit outcome, or Error

        Errors:
            - MISSING_FIELDS: Token or password missing
            - INVALID_PASSWORD: Password too short
            - UNKNOWN_TOKEN: No request carries this token
            - TOKEN_EXPIRED: Approved request past its deadline (now expired)
            - NOT_APPROVED: Request is not in approved state, including a
              pending one that expired on this access
        """
        if not token or not new_password:
            return Return.err(Error("MISSING_FIELDS", "Token and password required"))

        password_validation = validate_new_password(new_password, self.password_min_length)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        password_hash = hash_password(new_password, self.bcrypt_rounds)

        async with self.uow:
            now = self.clock()
            claimed = await self.uow.reset_requests.transition(
                token, [ResetStatus.approved], ResetStatus.used, live_at=now
            )

            if not claimed:
                reset_request = await self.uow.reset_requests.get_by_token(token)

                if reset_request is None:
                    return Return.err(Error("UNKNOWN_TOKEN", "Invalid token"))

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
                    if current is ResetStatus.approved:
                        return Return.err(Error("TOKEN_EXPIRED", "Token expired"))
                    current = ResetStatus.expired

                return Return.err(
                    Error("NOT_APPROVED", f"Token not approved. Status: {current.value}")
                )

            reset_request = await self.uow.reset_requests.get_by_token(token)
            account = await IdentityResolver(self.uow).write_password_hash(
                reset_request.account_kind, reset_request.email, password_hash
            )

            if account is None:
                await self.uow.audit_events.create(
                    AuditEvent(
                        account_kind=reset_request.account_kind,
                        action="password_reset_stale_account",
                        event_metadata={"email": reset_request.email},
                    )
                )
                await self.uow.commit()
                logger.warning(
                    f"Password reset for {reset_request.email} closed without a write: "
                    f"{reset_request.account_kind.value} account no longer exists"
                )
                return Return.ok(
                    ConfirmPasswordResetResponse(
                        status="stale_account",
                        message="Reset request closed. The account no longer exists.",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    account_kind=account.kind,
                    account_key=account.key,
                    action="password_reset_completed",
                    event_metadata={"email": reset_request.email},
                )
            )
            await self.uow.commit()

            logger.info(f"Password reset completed for {account.kind.value} {account.key}")
            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password reset successful!",
                )
            )

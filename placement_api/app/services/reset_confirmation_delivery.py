"""
Reset Confirmation Delivery

Builds the approve/deny email for a reset request and hands it to the
mail sender. No retries: a failure is returned to the issuer at once.
"""

import logging
from urllib.parse import urlencode

from placement_api.libs.result import Error, Result, Return
from placement_api.app.services.mail_sender import IMailSender, MailDeliveryError
from placement_api.domain.entities import AccountKind

logger = logging.getLogger(__name__)

APPROVE_PATH = "/verify-reset"
DENY_PATH = "/deny-reset"

_TEMPLATE = """
<p>Dear {kind_upper},</p>
<p>We received a password reset request for your {kind} account.</p>
<p>Please confirm whether this was you:</p>
<a href="{approve_link}"
   style="background:#4F46E5;color:white;padding:10px 20px;text-decoration:none;border-radius:8px;">Yes</a>
<a href="{deny_link}"
   style="background:#EF4444;color:white;padding:10px 20px;text-decoration:none;border-radius:8px;margin-left:10px;">No</a>
<p>This link will expire in {ttl_minutes} minutes.</p>
"""


class ResetConfirmationDelivery:
    def __init__(self, mail_sender: IMailSender, base_url: str, ttl_minutes: int):
        self.mail_sender = mail_sender
        self.base_url = base_url.rstrip("/")
        self.ttl_minutes = ttl_minutes

    def build_links(self, token: str) -> tuple[str, str]:
        """Absolute approve and deny URLs carrying the token as a query parameter"""
        query = urlencode({"token": token})
        return (
            f"{self.base_url}{APPROVE_PATH}?{query}",
            f"{self.base_url}{DENY_PATH}?{query}",
        )

    def compose(self, kind: AccountKind, token: str) -> tuple[str, str]:
        """Return (subject, html_body) for the confirmation email"""
        approve_link, deny_link = self.build_links(token)
        subject = f"{kind.value.upper()} Password Reset Verification"
        html_body = _TEMPLATE.format(
            kind_upper=kind.value.upper(),
            kind=kind.value,
            approve_link=approve_link,
            deny_link=deny_link,
            ttl_minutes=self.ttl_minutes,
        )
        return subject, html_body

    async def deliver(self, email: str, kind: AccountKind, token: str) -> Result[None]:
        subject, html_body = self.compose(kind, token)
        try:
            await self.mail_sender.send(email, subject, html_body)
        except MailDeliveryError as exc:
            logger.error(f"Reset confirmation email to {email} failed: {exc}")
            return Return.err(
                Error("DELIVERY_FAILED", "Could not send the verification email")
            )
        return Return.ok(None)

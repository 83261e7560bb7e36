"""
SMTP Mail Sender

Sends transactional mail through an SMTP relay. smtplib is blocking, so the
send runs in the default executor.
"""

import asyncio
import logging
import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr

from placement_api.app.services.mail_sender import IMailSender, MailDeliveryError

logger = logging.getLogger(__name__)


class SmtpMailSender(IMailSender):
    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str,
        use_tls: bool = True,
        timeout: int = 30,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpMailSender":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            from_email=config.MAIL_FROM,
            from_name=config.MAIL_FROM_NAME,
            use_tls=config.SMTP_USE_TLS,
            timeout=config.SMTP_TIMEOUT,
        )

    def _build_message(self, to: str, subject: str, html_body: str) -> MIMEText:
        msg = MIMEText(html_body, "html", "utf-8")
        msg["Subject"] = subject
        msg["From"] = formataddr((self.from_name, self.from_email))
        msg["To"] = to
        return msg

    def _send_sync(self, msg: MIMEText, to: str) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.sendmail(self.from_email, [to], msg.as_string())

    async def send(self, to: str, subject: str, html_body: str) -> None:
        msg = self._build_message(to, subject, html_body)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._send_sync, msg, to)
        except (smtplib.SMTPException, OSError) as exc:
            logger.exception(f"SMTP delivery to {to} failed")
            raise MailDeliveryError(f"SMTP error sending email to {to}: {exc}") from exc
        logger.info(f"Email sent to {to}: {subject}")

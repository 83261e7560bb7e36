from abc import ABC, abstractmethod


class MailDeliveryError(Exception):
    """Raised by mail senders when a message could not be handed off"""


class IMailSender(ABC):
    """Outbound transactional mail - external collaborator"""

    @abstractmethod
    async def send(self, to: str, subject: str, html_body: str) -> None:
        """
        Send an HTML message.

        Raises:
            MailDeliveryError: the message was not accepted
        """
        pass

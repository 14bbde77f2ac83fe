import logging
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional, Protocol

import aiosmtplib

from models.contactrequest import RelayRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutgoingMail:
    """A send request handed to the mail transport."""
    from_: Optional[str]
    to: str
    subject: str
    text: Optional[str]


class MailTransport(Protocol):
    async def send(self, mail: OutgoingMail) -> None:
        ...


def compose_contact_mail(request: RelayRequest, recipient: str) -> OutgoingMail:
    # The submitter's address is shown as sender and embedded in the subject
    return OutgoingMail(
        from_=request.email,
        to=recipient,
        subject=f"Message from {request.email}",
        text=request.message,
    )


class SmtpTransport:
    """Sends mail through an authenticated SMTP account (Gmail by default)."""

    def __init__(
        self,
        username: str,
        password: str,
        hostname: str = "smtp.gmail.com",
        port: int = 587,
        start_tls: bool = True,
    ):
        self.username = username
        self.password = password
        self.hostname = hostname
        self.port = port
        self.start_tls = start_tls

    def build_message(self, mail: OutgoingMail) -> EmailMessage:
        if mail.from_ is None or mail.text is None:
            raise ValueError("Contact mail needs a sender address and a body")

        email_message = EmailMessage()
        email_message["From"] = mail.from_
        email_message["To"] = mail.to
        email_message["Subject"] = mail.subject
        email_message.set_content(mail.text)
        return email_message

    async def send(self, mail: OutgoingMail) -> None:
        email_message = self.build_message(mail)

        # The envelope sender is the authenticated account, the header keeps
        # the submitter's address.
        await aiosmtplib.send(
            email_message,
            sender=self.username,
            recipients=[mail.to],
            hostname=self.hostname,
            port=self.port,
            start_tls=self.start_tls,
            username=self.username,
            password=self.password,
        )
        logger.info(f"📧 Contact message relayed to {mail.to}")

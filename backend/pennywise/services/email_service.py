"""Service for sending reminder emails."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from email.message import EmailMessage
from email.utils import make_msgid
from html import escape
from typing import Optional, Union
import logging
import smtplib

from pennywise.config import Settings, settings
from pennywise.emails.templates import (
    REMINDER_SUBJECT, REMINDER_HTML, REMINDER_TEXT,
    TEST_SUBJECT, TEST_HTML, TEST_TEXT,
)
from pennywise.models.transaction import Transaction
from pennywise.schemas.reminder import EmailResult
from pennywise.services.recurring_service import format_frequency, to_reference_date

logger = logging.getLogger(__name__)


class Mailer(ABC):
    """Mail sink: delivers one HTML message and returns its message id."""

    @abstractmethod
    def send(
        self,
        sender: str,
        recipient: str,
        subject: str,
        html: str,
        text: Optional[str] = None
    ) -> str:
        """Deliver a message, raising on transport failure."""


class SmtpMailer(Mailer):
    """Mailer backed by an SMTP server."""

    def __init__(self, config: Settings):
        self.host = config.smtp_host
        self.port = config.smtp_port
        self.user = config.smtp_user
        self.password = config.smtp_pass
        self.use_tls = config.smtp_use_tls
        self.timeout = config.smtp_timeout

    def send(
        self,
        sender: str,
        recipient: str,
        subject: str,
        html: str,
        text: Optional[str] = None
    ) -> str:
        message = EmailMessage()
        message["From"] = sender
        message["To"] = recipient
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(text or "This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")

        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.user:
                smtp.login(self.user, self.password or "")
            smtp.send_message(message)

        return message["Message-ID"]


def get_mailer() -> Mailer:
    return SmtpMailer(settings)


def get_sender() -> str:
    return settings.smtp_from or settings.smtp_user or "no-reply@localhost"


def _format_due_date(due_date: Union[date, datetime]) -> str:
    return to_reference_date(due_date).strftime("%d %b %Y")


def build_reminder_email(transaction: Transaction, due_date: Union[date, datetime]) -> tuple:
    """Subject, HTML body and plain-text body for a reminder."""
    values = {
        "name": transaction.name,
        "amount": f"{settings.currency_symbol}{transaction.amount:,.2f}",
        "category": transaction.category or "Uncategorized",
        "frequency": format_frequency(transaction.recurring),
        "due_date": _format_due_date(due_date),
        "dashboard_url": f"{settings.app_url.rstrip('/')}/dashboard",
    }
    subject = REMINDER_SUBJECT.format(name=transaction.name)
    html = REMINDER_HTML.format(**{k: escape(str(v)) for k, v in values.items()})
    text = REMINDER_TEXT.format(**values)
    return subject, html, text


def send_recurring_transaction_reminder(
    recipient: str,
    transaction: Transaction,
    due_date: Union[date, datetime],
    mailer: Optional[Mailer] = None
) -> EmailResult:
    """
    Send a reminder for one recurring transaction.

    Never raises: transport errors come back as success=False. Eligibility
    and recording last_reminder_sent are the caller's job.
    """
    try:
        mailer = mailer or get_mailer()
        subject, html, text = build_reminder_email(transaction, due_date)
        message_id = mailer.send(get_sender(), recipient, subject, html, text)
    except Exception as e:
        logger.error(f"Error sending reminder email for transaction {transaction.id}: {e}")
        return EmailResult(success=False, error=str(e))

    logger.info(f"Reminder email sent: {message_id}")
    return EmailResult(success=True, message_id=message_id)


def send_test_email(recipient: str, mailer: Optional[Mailer] = None) -> EmailResult:
    """Send a message to check the SMTP configuration."""
    try:
        mailer = mailer or get_mailer()
        message_id = mailer.send(get_sender(), recipient, TEST_SUBJECT, TEST_HTML, TEST_TEXT)
    except Exception as e:
        logger.error(f"Error sending test email: {e}")
        return EmailResult(success=False, error=str(e))

    return EmailResult(success=True, message_id=message_id)

"""API endpoints for recurring transaction reminders."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pennywise.dependencies import get_db, get_mailer, Mailer
from pennywise.schemas.reminder import EmailResult, ReminderSweepResponse, SendTestEmailRequest
from pennywise.services import email_service, reminder_service

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.post("/sweep", response_model=ReminderSweepResponse)
def run_sweep(
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer)
):
    """
    Send reminders for every recurring transaction due today.
    Intended to be called once a day by a scheduler.
    """
    return reminder_service.run_reminder_sweep(db, mailer)


@router.post("/test-email", response_model=EmailResult)
def send_test_email(
    request: SendTestEmailRequest,
    mailer: Mailer = Depends(get_mailer)
):
    """Send a test email to check the mail configuration."""
    return email_service.send_test_email(request.email, mailer)

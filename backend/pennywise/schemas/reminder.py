"""Pydantic schemas for reminder emails."""

from pydantic import BaseModel, EmailStr
from typing import Optional, List


class EmailResult(BaseModel):
    """Outcome of a single send through the mail sink."""
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None


class ReminderOutcome(EmailResult):
    """Outcome of one reminder within a sweep."""
    transaction_id: str
    recipient: str


class ReminderSweepResponse(BaseModel):
    """Summary of a reminder sweep."""
    checked: int
    sent: int
    failed: int
    results: List[ReminderOutcome]


class SendTestEmailRequest(BaseModel):
    email: EmailStr

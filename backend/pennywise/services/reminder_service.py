"""Reminder sweep: find due recurring transactions and email their owners."""

from typing import Optional
from datetime import datetime
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pennywise.schemas.reminder import ReminderOutcome, ReminderSweepResponse
from pennywise.services.email_service import Mailer, send_recurring_transaction_reminder
from pennywise.services.recurring_service import find_due_transactions, mark_reminder_sent

logger = logging.getLogger(__name__)


def run_reminder_sweep(
    db: Session,
    mailer: Mailer,
    now: Optional[datetime] = None
) -> ReminderSweepResponse:
    """
    Send today's reminders.

    Each transaction is handled on its own: a failed send or a failed
    write-back is recorded and the sweep moves on.
    """
    now = now or datetime.utcnow()
    due = find_due_transactions(db, now)
    logger.info(f"Reminder sweep found {len(due)} due transaction(s)")

    results = []
    for transaction in due:
        recipient = transaction.budget.created_by
        result = send_recurring_transaction_reminder(
            recipient, transaction, transaction.next_due_date, mailer
        )
        outcome = ReminderOutcome(
            transaction_id=transaction.id,
            recipient=recipient,
            **result.model_dump(),
        )

        if result.success:
            try:
                mark_reminder_sent(transaction, now)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Failed to record reminder for transaction {transaction.id}: {e}")
                outcome.success = False
                outcome.error = f"Reminder sent but not recorded: {e}"

        results.append(outcome)

    sent = sum(1 for r in results if r.success)
    return ReminderSweepResponse(
        checked=len(due),
        sent=sent,
        failed=len(results) - sent,
        results=results,
    )

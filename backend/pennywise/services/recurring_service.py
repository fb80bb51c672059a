"""Service for recurring transaction scheduling and reminder eligibility."""

from typing import List, Optional, Union, Dict
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo
import logging

from dateutil.relativedelta import relativedelta
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from pennywise.config import settings
from pennywise.exceptions import DataUnavailable
from pennywise.models.transaction import Transaction, Recurrence

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

# relativedelta clamps to the last day of the target month (Jan 31 -> Feb 28/29).
_STEPS: Dict[Recurrence, relativedelta] = {
    Recurrence.daily: relativedelta(days=1),
    Recurrence.weekly: relativedelta(weeks=1),
    Recurrence.monthly: relativedelta(months=1),
    Recurrence.yearly: relativedelta(years=1),
}

_LABELS: Dict[Recurrence, str] = {
    Recurrence.none: "One-time",
    Recurrence.daily: "Daily",
    Recurrence.weekly: "Weekly",
    Recurrence.monthly: "Monthly",
    Recurrence.yearly: "Yearly",
}


def parse_frequency(frequency: Union[Recurrence, str, None]) -> Optional[Recurrence]:
    """Resolve a frequency label case-insensitively. Unknown labels give None."""
    if frequency is None:
        return None
    if isinstance(frequency, Recurrence):
        return frequency
    try:
        return Recurrence(str(frequency).strip().lower())
    except ValueError:
        return None


def calculate_next_due_date(
    anchor: DateLike,
    frequency: Union[Recurrence, str, None]
) -> Optional[DateLike]:
    """
    Calculate the next due date for a recurring transaction.

    Returns None for "none" and for unrecognized frequencies, meaning the
    transaction does not recur.
    """
    step = _STEPS.get(parse_frequency(frequency))
    if step is None:
        return None
    return anchor + step


def get_recurring_frequencies() -> List[Dict[str, str]]:
    """All frequency options, in display order."""
    return [
        {"value": r.value, "label": "None" if r is Recurrence.none else _LABELS[r]}
        for r in Recurrence
    ]


def format_frequency(frequency: Union[Recurrence, str, None]) -> str:
    parsed = parse_frequency(frequency)
    return _LABELS[parsed] if parsed is not None else "Unknown"


def apply_recurrence(transaction: Transaction, anchor: Optional[datetime] = None) -> Transaction:
    """
    Set or clear next_due_date so it is present iff the transaction recurs.
    """
    anchor = anchor or transaction.created_at or datetime.utcnow()
    transaction.next_due_date = calculate_next_due_date(anchor, transaction.recurring)
    return transaction


def get_reference_zone(name: Optional[str] = None) -> tzinfo:
    """Timezone in which calendar days are compared."""
    name = name or settings.reminder_timezone
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def to_reference_date(value: DateLike, zone: Optional[tzinfo] = None) -> date:
    """Calendar date of a timestamp in the reference zone. Naive values are UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(zone or get_reference_zone()).date()
    return value


def is_same_calendar_day(a: DateLike, b: DateLike, zone: Optional[tzinfo] = None) -> bool:
    zone = zone or get_reference_zone()
    return to_reference_date(a, zone) == to_reference_date(b, zone)


def is_due(
    transaction: Transaction,
    now: Optional[datetime] = None,
    zone: Optional[tzinfo] = None
) -> bool:
    """
    Whether a reminder should go out for this transaction today.

    Does not mark anything; the caller records last_reminder_sent after a
    successful send.
    """
    now = now or datetime.utcnow()
    zone = zone or get_reference_zone()

    if parse_frequency(transaction.recurring) in (None, Recurrence.none):
        return False
    if transaction.next_due_date is None:
        return False
    if not is_same_calendar_day(transaction.next_due_date, now, zone):
        return False
    if transaction.last_reminder_sent is not None and is_same_calendar_day(
        transaction.last_reminder_sent, now, zone
    ):
        return False
    return True


def _day_bounds_utc(now: datetime, zone: tzinfo) -> tuple:
    """Start and end of now's reference day, as naive UTC timestamps."""
    day = to_reference_date(now, zone)
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=zone)
    return (
        start.astimezone(timezone.utc).replace(tzinfo=None),
        end.astimezone(timezone.utc).replace(tzinfo=None),
    )


def find_due_transactions(db: Session, now: Optional[datetime] = None) -> List[Transaction]:
    """Get every transaction that should receive a reminder today."""
    now = now or datetime.utcnow()
    zone = get_reference_zone()
    start, end = _day_bounds_utc(now, zone)

    try:
        candidates = db.query(Transaction).options(
            joinedload(Transaction.budget)
        ).filter(
            Transaction.recurring != Recurrence.none,
            Transaction.next_due_date.isnot(None),
            Transaction.next_due_date >= start,
            Transaction.next_due_date < end
        ).order_by(Transaction.next_due_date).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to load due transactions: {e}")
        raise DataUnavailable("Failed to fetch due transactions") from e

    return [t for t in candidates if is_due(t, now, zone)]


def mark_reminder_sent(transaction: Transaction, sent_at: Optional[datetime] = None) -> Transaction:
    """
    Record a successful reminder and advance the due date.

    last_reminder_sent never moves backwards.
    """
    sent_at = sent_at or datetime.utcnow()
    if sent_at.tzinfo is not None:
        sent_at = sent_at.astimezone(timezone.utc).replace(tzinfo=None)
    if transaction.last_reminder_sent is None or sent_at > transaction.last_reminder_sent:
        transaction.last_reminder_sent = sent_at

    if transaction.next_due_date is not None:
        transaction.next_due_date = calculate_next_due_date(
            transaction.next_due_date, transaction.recurring
        )
    return transaction

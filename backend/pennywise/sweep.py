"""
Run one reminder sweep. Meant to be called daily by an external scheduler:

    python -m pennywise.sweep
"""

import logging

from pennywise.config import settings
from pennywise.database import database
from pennywise.exceptions import DataUnavailable
from pennywise.services.email_service import get_mailer
from pennywise.services.reminder_service import run_reminder_sweep

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=settings.log_level.upper())

    try:
        db = database.session()
    except DataUnavailable as e:
        logger.error(f"Reminder sweep aborted: {e}")
        return 1

    try:
        result = run_reminder_sweep(db, get_mailer())
    except DataUnavailable as e:
        logger.error(f"Reminder sweep aborted: {e}")
        return 1
    finally:
        db.close()

    logger.info(f"Reminder sweep done: {result.sent} sent, {result.failed} failed")
    return 0 if result.failed == 0 else 2


if __name__ == "__main__":
    raise SystemExit(main())

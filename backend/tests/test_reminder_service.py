"""Tests for the reminder sweep."""

from datetime import datetime

from pennywise.models.transaction import Recurrence
from pennywise.services.reminder_service import run_reminder_sweep

from conftest import OWNER, FakeMailer, make_budget, make_transaction

NOW = datetime(2024, 6, 15, 10, 0)


def _due(db_session, budget, name):
    return make_transaction(
        db_session, budget, name=name, recurring=Recurrence.monthly,
        created_at=datetime(2024, 5, 15, 8, 0),
        next_due_date=datetime(2024, 6, 15, 8, 0),
    )


class TestReminderSweep:
    """Tests for sending and recording reminders."""

    def test_sends_and_marks(self, db_session):
        budget = make_budget(db_session)
        txn = _due(db_session, budget, "Gym")
        mailer = FakeMailer()

        result = run_reminder_sweep(db_session, mailer, NOW)

        assert result.checked == 1
        assert result.sent == 1
        assert result.failed == 0
        assert result.results[0].recipient == OWNER
        assert mailer.sent[0]["to"] == OWNER

        db_session.refresh(txn)
        assert txn.last_reminder_sent == NOW
        assert txn.next_due_date == datetime(2024, 7, 15, 8, 0)

    def test_second_sweep_same_day_sends_nothing(self, db_session):
        budget = make_budget(db_session)
        _due(db_session, budget, "Gym")
        mailer = FakeMailer()

        run_reminder_sweep(db_session, mailer, NOW)
        result = run_reminder_sweep(db_session, mailer, NOW)

        assert result.checked == 0
        assert len(mailer.sent) == 1

    def test_failure_does_not_abort_others(self, db_session):
        budget = make_budget(db_session)
        failing = _due(db_session, budget, "Gym")
        ok = _due(db_session, budget, "Rent")
        mailer = FakeMailer(fail_for=["Gym"])

        result = run_reminder_sweep(db_session, mailer, NOW)

        assert result.checked == 2
        assert result.sent == 1
        assert result.failed == 1

        db_session.refresh(failing)
        db_session.refresh(ok)
        assert failing.last_reminder_sent is None
        assert failing.next_due_date == datetime(2024, 6, 15, 8, 0)
        assert ok.last_reminder_sent == NOW

    def test_nothing_due(self, db_session):
        budget = make_budget(db_session)
        make_transaction(db_session, budget, name="Coffee")

        result = run_reminder_sweep(db_session, FakeMailer(), NOW)

        assert result.checked == 0
        assert result.results == []

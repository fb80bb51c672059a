"""Tests for reminder API endpoints."""

from conftest import OWNER


class TestRemindersAPI:
    """Test reminder sweep and test email endpoints."""

    def test_sweep_sends_due_reminder(self, client, mailer, recurring_transaction, db_session):
        response = client.post("/api/v1/reminders/sweep")
        assert response.status_code == 200
        data = response.json()
        assert data["checked"] == 1
        assert data["sent"] == 1
        assert data["results"][0]["transaction_id"] == recurring_transaction.id
        assert mailer.sent[0]["to"] == OWNER
        assert "Netflix Subscription" in mailer.sent[0]["subject"]

        db_session.refresh(recurring_transaction)
        assert recurring_transaction.last_reminder_sent is not None

    def test_sweep_is_idempotent_within_a_day(self, client, mailer, recurring_transaction):
        client.post("/api/v1/reminders/sweep")
        response = client.post("/api/v1/reminders/sweep")

        assert response.json()["checked"] == 0
        assert len(mailer.sent) == 1

    def test_sweep_skips_one_time(self, client, mailer, sample_transaction):
        response = client.post("/api/v1/reminders/sweep")
        assert response.json()["checked"] == 0
        assert mailer.sent == []

    def test_send_test_email(self, client, mailer):
        response = client.post("/api/v1/reminders/test-email", json={"email": OWNER})
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert mailer.sent[0]["subject"] == "Test Email - Budget Tracker"

    def test_send_test_email_failure(self, client, mailer):
        mailer.error = ConnectionError("SMTP down")

        response = client.post("/api/v1/reminders/test-email", json={"email": OWNER})
        data = response.json()
        assert data["success"] is False
        assert "SMTP down" in data["error"]

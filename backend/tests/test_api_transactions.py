"""Tests for transactions API endpoints."""

from datetime import datetime
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from pennywise.database import get_db
from pennywise.main import app

from conftest import OWNER, make_transaction


class TestTransactionsAPI:
    """Test transactions endpoints."""

    def test_list_transactions_empty(self, client):
        """Should return empty paginated list."""
        response = client.get("/api/v1/transactions", params={"owner": OWNER})
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    def test_list_transactions_with_data(self, client, sample_transaction):
        """Should return transactions."""
        response = client.get("/api/v1/transactions", params={"owner": OWNER})
        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 1
        assert data["total"] == 1
        assert data["items"][0]["name"] == "Whole Foods"

    def test_list_transactions_paginated(self, client, sample_budget, db_session):
        """Should page newest first."""
        for day in range(1, 13):
            make_transaction(db_session, sample_budget, name=f"T{day}", created_at=datetime(2024, 1, day))

        response = client.get("/api/v1/transactions", params={"owner": OWNER, "page": 2})
        data = response.json()
        assert data["total"] == 12
        assert data["pages"] == 2
        assert [t["name"] for t in data["items"]] == ["T2", "T1"]

    def test_get_transaction(self, client, sample_transaction):
        """Should return single transaction."""
        response = client.get(f"/api/v1/transactions/{sample_transaction.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sample_transaction.id

    def test_get_transaction_not_found(self, client):
        response = client.get("/api/v1/transactions/missing")
        assert response.status_code == 404

    def test_frequencies(self, client):
        response = client.get("/api/v1/transactions/frequencies")
        assert response.status_code == 200
        assert [f["value"] for f in response.json()] == ["none", "daily", "weekly", "monthly", "yearly"]

    def test_create_one_time(self, client, sample_budget):
        """Should create a transaction with no next due date."""
        response = client.post("/api/v1/transactions", json={
            "name": "Coffee", "amount": 4.5, "budget_id": sample_budget.id,
        })
        assert response.status_code == 201
        data = response.json()
        assert data["recurring"] == "none"
        assert data["next_due_date"] is None

    def test_create_recurring(self, client, sample_budget):
        """Should schedule the next due date one period after creation."""
        response = client.post("/api/v1/transactions", json={
            "name": "Gym", "amount": 30, "budget_id": sample_budget.id, "recurring": "Weekly",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["recurring"] == "weekly"
        created = datetime.fromisoformat(data["created_at"])
        next_due = datetime.fromisoformat(data["next_due_date"])
        assert (next_due - created).days == 7

    def test_create_rejects_blank_name(self, client, sample_budget):
        response = client.post("/api/v1/transactions", json={
            "name": "   ", "amount": 10, "budget_id": sample_budget.id,
        })
        assert response.status_code == 422

    def test_update_rejects_blank_name(self, client, sample_transaction, db_session):
        response = client.patch(
            f"/api/v1/transactions/{sample_transaction.id}",
            json={"name": "   "}
        )
        assert response.status_code == 422
        db_session.refresh(sample_transaction)
        assert sample_transaction.name == "Whole Foods"

    def test_update_strips_name(self, client, sample_transaction):
        response = client.patch(
            f"/api/v1/transactions/{sample_transaction.id}",
            json={"name": "  Trader Joe's  "}
        )
        assert response.json()["name"] == "Trader Joe's"

    def test_create_rejects_non_positive_amount(self, client, sample_budget):
        response = client.post("/api/v1/transactions", json={
            "name": "Refund", "amount": 0, "budget_id": sample_budget.id,
        })
        assert response.status_code == 422

    def test_create_rejects_unknown_frequency(self, client, sample_budget):
        response = client.post("/api/v1/transactions", json={
            "name": "Rent", "amount": 10, "budget_id": sample_budget.id, "recurring": "fortnightly",
        })
        assert response.status_code == 422

    def test_create_rejects_missing_budget(self, client):
        response = client.post("/api/v1/transactions", json={
            "name": "Rent", "amount": 10, "budget_id": "missing",
        })
        assert response.status_code == 400
        assert "missing" in response.json()["detail"]

    def test_update_recurrence(self, client, sample_transaction):
        """Changing the frequency should schedule a reminder."""
        response = client.patch(
            f"/api/v1/transactions/{sample_transaction.id}",
            json={"recurring": "monthly"}
        )
        assert response.status_code == 200
        assert response.json()["next_due_date"] is not None

        response = client.patch(
            f"/api/v1/transactions/{sample_transaction.id}",
            json={"recurring": "none"}
        )
        assert response.json()["next_due_date"] is None

    def test_update_category(self, client, sample_transaction):
        response = client.patch(
            f"/api/v1/transactions/{sample_transaction.id}",
            json={"category": "Dining"}
        )
        assert response.status_code == 200
        assert response.json()["category"] == "Dining"

    def test_delete_store_failure(self, client):
        """Should return 503 when the delete cannot be saved."""
        db = MagicMock()
        db.commit.side_effect = OperationalError("DELETE", {}, Exception("database is locked"))
        app.dependency_overrides[get_db] = lambda: db

        response = client.delete("/api/v1/transactions/some-id")
        assert response.status_code == 503
        db.rollback.assert_called_once()

    def test_delete_transaction(self, client, sample_transaction):
        response = client.delete(f"/api/v1/transactions/{sample_transaction.id}")
        assert response.status_code == 200
        assert client.get(f"/api/v1/transactions/{sample_transaction.id}").status_code == 404

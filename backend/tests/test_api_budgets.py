"""Tests for budgets API endpoints."""

from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from pennywise.database import get_db
from pennywise.main import app
from pennywise.models.budget import Budget

from conftest import OWNER, make_budget


class TestBudgetsAPI:
    """Test budget endpoints."""

    def test_create_budget(self, client):
        """Should create a budget for the owner."""
        response = client.post("/api/v1/budgets", json={
            "name": "  Groceries ",
            "amount": 400,
            "icon": "🛒",
            "created_by": OWNER,
        })
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Groceries"
        assert float(data["amount"]) == 400
        assert data["created_by"] == OWNER
        assert data["id"]

    def test_create_budget_invalid_email(self, client):
        """Should reject an owner that is not an email."""
        response = client.post("/api/v1/budgets", json={
            "name": "Groceries", "amount": 400, "created_by": "not-an-email",
        })
        assert response.status_code == 422

    def test_create_budget_negative_amount(self, client):
        """Should reject a negative amount."""
        response = client.post("/api/v1/budgets", json={
            "name": "Groceries", "amount": -1, "created_by": OWNER,
        })
        assert response.status_code == 422

    def test_create_budget_blank_name(self, client, db_session):
        """Should reject a whitespace-only name without storing it."""
        response = client.post("/api/v1/budgets", json={
            "name": "   ", "amount": 10, "created_by": OWNER,
        })
        assert response.status_code == 422
        assert db_session.query(Budget).count() == 0

    def test_update_budget_blank_name(self, client, sample_budget):
        response = client.patch(f"/api/v1/budgets/{sample_budget.id}", json={"name": "  "})
        assert response.status_code == 422

    def test_update_budget_strips_name(self, client, sample_budget):
        response = client.patch(f"/api/v1/budgets/{sample_budget.id}", json={"name": " Dining "})
        assert response.json()["name"] == "Dining"

    def test_create_budget_store_failure(self, client):
        """Should return 503 when the change cannot be saved."""
        db = MagicMock()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))
        app.dependency_overrides[get_db] = lambda: db

        response = client.post("/api/v1/budgets", json={
            "name": "Groceries", "amount": 400, "created_by": OWNER,
        })
        assert response.status_code == 503
        db.rollback.assert_called_once()

    def test_list_budgets_with_spend(self, client, sample_transaction, db_session):
        """Should include spend for the owner's budgets only."""
        make_budget(db_session, name="Other", owner="someone@example.com")

        response = client.get("/api/v1/budgets", params={"owner": OWNER})
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["total_spend"] == 50
        assert data[0]["total_transactions"] == 1

    def test_get_budget(self, client, sample_budget):
        """Should return a single budget."""
        response = client.get(f"/api/v1/budgets/{sample_budget.id}")
        assert response.status_code == 200
        assert response.json()["total_spend"] == 0

    def test_get_budget_not_found(self, client):
        response = client.get("/api/v1/budgets/missing")
        assert response.status_code == 404

    def test_update_budget(self, client, sample_budget):
        """Should update the amount."""
        response = client.patch(f"/api/v1/budgets/{sample_budget.id}", json={"amount": 1500})
        assert response.status_code == 200
        assert float(response.json()["amount"]) == 1500
        assert response.json()["name"] == sample_budget.name

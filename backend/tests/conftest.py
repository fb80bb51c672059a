"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
import uuid

from pennywise.ai.client import MockProvider, get_completion_provider
from pennywise.database import Base, get_db
from pennywise.main import app
from pennywise.models.budget import Budget
from pennywise.models.transaction import Transaction, Recurrence
from pennywise.services.email_service import Mailer, get_mailer

OWNER = "owner@example.com"


class FakeMailer(Mailer):
    """Mailer that records messages instead of sending them."""

    def __init__(self, error: Optional[Exception] = None, fail_for: Optional[List[str]] = None):
        self.error = error
        self.fail_for = fail_for or []
        self.sent = []

    def send(self, sender, recipient, subject, html, text=None):
        if self.error is not None:
            raise self.error
        if any(name in subject for name in self.fail_for):
            raise ConnectionError(f"SMTP rejected {subject}")
        self.sent.append({
            "from": sender,
            "to": recipient,
            "subject": subject,
            "html": html,
            "text": text,
        })
        return f"<message-{len(self.sent)}@test>"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture(scope="function")
def client(db_session, mailer):
    """Create a test client with database, mailer and AI provider overrides."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_completion_provider] = lambda: MockProvider()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_budget(db_session, name="Food", amount="1000.00", owner=OWNER, category=None):
    budget = Budget(
        id=str(uuid.uuid4()),
        name=name,
        amount=Decimal(amount),
        category=category,
        icon="🍔",
        created_by=owner,
    )
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget


def make_transaction(
    db_session,
    budget,
    amount="100.00",
    name="Groceries",
    category=None,
    recurring=Recurrence.none,
    created_at=None,
    next_due_date=None,
    last_reminder_sent=None,
):
    txn = Transaction(
        id=str(uuid.uuid4()),
        name=name,
        amount=Decimal(amount),
        budget_id=budget.id,
        category=category,
        recurring=recurring,
        created_at=created_at or datetime.utcnow(),
        next_due_date=next_due_date,
        last_reminder_sent=last_reminder_sent,
    )
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


@pytest.fixture
def sample_budget(db_session):
    """Create a sample budget."""
    return make_budget(db_session, category="Food")


@pytest.fixture
def sample_transaction(db_session, sample_budget):
    """Create a sample one-time transaction."""
    return make_transaction(
        db_session,
        sample_budget,
        amount="50.00",
        name="Whole Foods",
        category="Groceries",
        created_at=datetime.utcnow() - timedelta(days=2),
    )


@pytest.fixture
def recurring_transaction(db_session, sample_budget):
    """Create a monthly transaction due today."""
    now = datetime.utcnow()
    return make_transaction(
        db_session,
        sample_budget,
        amount="15.99",
        name="Netflix Subscription",
        category="Entertainment",
        recurring=Recurrence.monthly,
        created_at=now - timedelta(days=31),
        next_due_date=now.replace(hour=0, minute=0, second=0, microsecond=0) + timedelta(hours=9),
    )

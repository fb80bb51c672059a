"""
Transaction database model.
"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from pennywise.database import Base


class Recurrence(str, enum.Enum):
    """Recurring frequency enumeration."""
    none = "none"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    budget_id = Column(String(36), ForeignKey("budgets.id"), nullable=False)
    category = Column(String(100), nullable=True)
    recurring = Column(Enum(Recurrence), default=Recurrence.none, nullable=False)
    next_due_date = Column(DateTime, nullable=True)  # Set only when recurring != none
    last_reminder_sent = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    budget = relationship("Budget", back_populates="transactions")

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_budget", "budget_id"),
        Index("idx_transaction_next_due", "recurring", "next_due_date"),
    )

"""
Budget database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric
from sqlalchemy.orm import relationship
from pennywise.database import Base


class Budget(Base):
    """A named spending allocation owned by a user."""

    __tablename__ = "budgets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String(100), nullable=True)
    icon = Column(String(50), nullable=True)
    created_by = Column(String(255), nullable=False, index=True)  # Owner email
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="budget")

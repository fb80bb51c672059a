"""
Database models package.
"""

from pennywise.models.budget import Budget
from pennywise.models.transaction import Transaction, Recurrence

__all__ = [
    "Budget",
    "Transaction",
    "Recurrence",
]

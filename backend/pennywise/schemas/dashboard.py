"""
Dashboard schemas.
"""

import enum
from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional


class InsightType(str, enum.Enum):
    warning = "warning"
    info = "info"
    success = "success"


class Insight(BaseModel):
    type: InsightType
    title: str
    message: str


class SnapshotSummary(BaseModel):
    total_budget: float = 0
    total_spent: float = 0
    remaining_budget: float = 0  # Negative when overspent
    budget_utilization_percentage: float = 0
    total_transactions: int = 0
    average_transaction_amount: float = 0


class BudgetUtilization(BaseModel):
    id: str
    name: str
    amount: float
    category: Optional[str] = None
    icon: Optional[str] = None
    total_spend: float
    total_transactions: int
    utilization_percentage: float
    remaining_amount: float


class RecentTransaction(BaseModel):
    id: str
    name: str
    amount: float
    category: Optional[str] = None
    recurring: str
    created_at: datetime
    budget_name: str


class CategorySpending(BaseModel):
    category: str
    total_amount: float
    transaction_count: int


class MonthlySpending(BaseModel):
    month: str  # YYYY-MM
    total_amount: float
    transaction_count: int


class FinancialSnapshot(BaseModel):
    summary: SnapshotSummary
    budgets: List[BudgetUtilization] = []
    recent_transactions: List[RecentTransaction] = []
    category_spending: List[CategorySpending] = []
    monthly_spending: List[MonthlySpending] = []
    insights: List[Insight] = []

    @property
    def has_data(self) -> bool:
        return bool(self.budgets or self.recent_transactions)

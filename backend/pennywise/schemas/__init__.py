"""
Pydantic schemas package.
"""

from pennywise.schemas.budget import (
    BudgetBase,
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetWithSpend,
)
from pennywise.schemas.transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
    FrequencyOption,
)
from pennywise.schemas.dashboard import (
    InsightType,
    Insight,
    SnapshotSummary,
    BudgetUtilization,
    RecentTransaction,
    CategorySpending,
    MonthlySpending,
    FinancialSnapshot,
)
from pennywise.schemas.advisor import (
    InsightRequest,
    AdvisorResponse,
    QuickTipsResponse,
)
from pennywise.schemas.reminder import (
    EmailResult,
    ReminderOutcome,
    ReminderSweepResponse,
    SendTestEmailRequest,
)

__all__ = [
    "BudgetBase",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetResponse",
    "BudgetWithSpend",
    "TransactionBase",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionListResponse",
    "FrequencyOption",
    "InsightType",
    "Insight",
    "SnapshotSummary",
    "BudgetUtilization",
    "RecentTransaction",
    "CategorySpending",
    "MonthlySpending",
    "FinancialSnapshot",
    "InsightRequest",
    "AdvisorResponse",
    "QuickTipsResponse",
    "EmailResult",
    "ReminderOutcome",
    "ReminderSweepResponse",
    "SendTestEmailRequest",
]

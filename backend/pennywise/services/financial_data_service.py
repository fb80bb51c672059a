"""Service for aggregating a user's budgets and transactions into a snapshot."""

from typing import List, Optional, Sequence
from datetime import datetime, timedelta
from decimal import Decimal
import logging

from dateutil.relativedelta import relativedelta
from sqlalchemy import extract, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pennywise.config import settings
from pennywise.exceptions import DataUnavailable
from pennywise.models.budget import Budget
from pennywise.models.transaction import Transaction
from pennywise.schemas.dashboard import (
    FinancialSnapshot,
    SnapshotSummary,
    BudgetUtilization,
    RecentTransaction,
    CategorySpending,
    MonthlySpending,
    Insight,
    InsightType,
)

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"
RECENT_DAYS = 30
RECENT_LIMIT = 50
TREND_MONTHS = 6

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _percentage(part: Decimal, whole: Decimal) -> Decimal:
    return part / whole * HUNDRED if whole > 0 else ZERO


def _format_money(amount: float) -> str:
    return f"{settings.currency_symbol}{amount:,.2f}"


def fetch_budget_spending(db: Session, owner: str) -> List[BudgetUtilization]:
    """Budgets of the owner with spend and count of their transactions."""
    rows = db.query(
        Budget.id,
        Budget.name,
        Budget.amount,
        Budget.category,
        Budget.icon,
        func.coalesce(func.sum(Transaction.amount), 0).label("total_spend"),
        func.count(Transaction.id).label("total_transactions"),
    ).outerjoin(
        Transaction, Transaction.budget_id == Budget.id
    ).filter(
        Budget.created_by == owner
    ).group_by(
        Budget.id, Budget.name, Budget.amount, Budget.category, Budget.icon, Budget.created_at
    ).order_by(Budget.created_at, Budget.name).all()

    budgets = []
    for row in rows:
        amount = _decimal(row.amount)
        spend = _decimal(row.total_spend)
        budgets.append(BudgetUtilization(
            id=row.id,
            name=row.name,
            amount=float(amount),
            category=row.category,
            icon=row.icon,
            total_spend=float(spend),
            total_transactions=int(row.total_transactions or 0),
            utilization_percentage=float(_percentage(spend, amount)),
            remaining_amount=float(amount - spend),
        ))
    return budgets


def fetch_recent_transactions(db: Session, owner: str, now: datetime) -> List[RecentTransaction]:
    cutoff = now - timedelta(days=RECENT_DAYS)

    rows = db.query(
        Transaction.id,
        Transaction.name,
        Transaction.amount,
        Transaction.category,
        Transaction.recurring,
        Transaction.created_at,
        Budget.name.label("budget_name"),
    ).join(
        Budget, Budget.id == Transaction.budget_id
    ).filter(
        Budget.created_by == owner,
        Transaction.created_at >= cutoff
    ).order_by(
        Transaction.created_at.desc()
    ).limit(RECENT_LIMIT).all()

    return [
        RecentTransaction(
            id=row.id,
            name=row.name,
            amount=float(_decimal(row.amount)),
            category=row.category,
            recurring=getattr(row.recurring, "value", row.recurring) or "none",
            created_at=row.created_at,
            budget_name=row.budget_name,
        )
        for row in rows
    ]


def fetch_category_spending(db: Session, owner: str) -> List[CategorySpending]:
    """Totals per category over all of the owner's transactions, largest first."""
    category = func.coalesce(Transaction.category, UNCATEGORIZED).label("category")
    total = func.coalesce(func.sum(Transaction.amount), 0).label("total_amount")

    rows = db.query(
        category,
        total,
        func.count(Transaction.id).label("transaction_count"),
    ).join(
        Budget, Budget.id == Transaction.budget_id
    ).filter(
        Budget.created_by == owner
    ).group_by(category).order_by(total.desc(), category).all()

    return [
        CategorySpending(
            category=row.category or UNCATEGORIZED,
            total_amount=float(_decimal(row.total_amount)),
            transaction_count=int(row.transaction_count or 0),
        )
        for row in rows
    ]


def fetch_monthly_spending(db: Session, owner: str, now: datetime) -> List[MonthlySpending]:
    """Per-month totals for the last six months, oldest first."""
    cutoff = now - relativedelta(months=TREND_MONTHS)
    year = extract("year", Transaction.created_at).label("year")
    month = extract("month", Transaction.created_at).label("month")

    rows = db.query(
        year,
        month,
        func.coalesce(func.sum(Transaction.amount), 0).label("total_amount"),
        func.count(Transaction.id).label("transaction_count"),
    ).join(
        Budget, Budget.id == Transaction.budget_id
    ).filter(
        Budget.created_by == owner,
        Transaction.created_at >= cutoff
    ).group_by(year, month).order_by(year, month).all()

    return [
        MonthlySpending(
            month=f"{int(row.year):04d}-{int(row.month):02d}",
            total_amount=float(_decimal(row.total_amount)),
            transaction_count=int(row.transaction_count or 0),
        )
        for row in rows
    ]


def generate_basic_insights(
    budgets: Sequence[BudgetUtilization],
    category_spending: Sequence[CategorySpending],
    utilization_percentage: float
) -> List[Insight]:
    """Rule-based insights from aggregated data. Each rule fires independently."""
    insights = []

    overspent = [b for b in budgets if b.utilization_percentage > 100]
    if overspent:
        insights.append(Insight(
            type=InsightType.warning,
            title="Budget Overspending",
            message=f"You've exceeded {len(overspent)} budget(s): {', '.join(b.name for b in overspent)}",
        ))

    if category_spending:
        top = max(category_spending, key=lambda c: c.total_amount)
        insights.append(Insight(
            type=InsightType.info,
            title="Top Spending Category",
            message=f'Your highest spending category is "{top.category}" with {_format_money(top.total_amount)}',
        ))

    if utilization_percentage > 90:
        insights.append(Insight(
            type=InsightType.warning,
            title="High Budget Utilization",
            message=f"You've used {utilization_percentage:.1f}% of your total budget",
        ))
    elif utilization_percentage < 50:
        insights.append(Insight(
            type=InsightType.success,
            title="Good Budget Management",
            message=f"You're doing well! Only {utilization_percentage:.1f}% of your budget used",
        ))

    return insights


def build_summary(budgets: Sequence[BudgetUtilization]) -> SnapshotSummary:
    total_budget = sum((_decimal(b.amount) for b in budgets), ZERO)
    total_spent = sum((_decimal(b.total_spend) for b in budgets), ZERO)
    total_transactions = sum(b.total_transactions for b in budgets)
    average = total_spent / total_transactions if total_transactions > 0 else ZERO

    return SnapshotSummary(
        total_budget=float(total_budget),
        total_spent=float(total_spent),
        remaining_budget=float(total_budget - total_spent),
        budget_utilization_percentage=float(_percentage(total_spent, total_budget)),
        total_transactions=total_transactions,
        average_transaction_amount=float(average),
    )


def get_financial_snapshot(
    db: Session,
    owner: str,
    now: Optional[datetime] = None
) -> FinancialSnapshot:
    """
    Build the dashboard/AI snapshot for one owner.

    All four queries must succeed; any store error is raised as
    DataUnavailable and no partial snapshot is returned.
    """
    now = now or datetime.utcnow()

    try:
        budgets = fetch_budget_spending(db, owner)
        recent = fetch_recent_transactions(db, owner, now)
        categories = fetch_category_spending(db, owner)
        monthly = fetch_monthly_spending(db, owner, now)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching financial data for {owner}")
        raise DataUnavailable("Failed to fetch financial data") from e

    summary = build_summary(budgets)

    return FinancialSnapshot(
        summary=summary,
        budgets=budgets,
        recent_transactions=recent,
        category_spending=categories,
        monthly_spending=monthly,
        insights=generate_basic_insights(
            budgets, categories, summary.budget_utilization_percentage
        ),
    )

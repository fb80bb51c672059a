"""
Budget API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List

from pennywise.dependencies import get_db
from pennywise.database import commit
from pennywise.models import Budget, Transaction
from pennywise.schemas.budget import (
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetWithSpend,
)

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _with_spend(db: Session, budget: Budget) -> BudgetWithSpend:
    total_spend, count = db.query(
        func.coalesce(func.sum(Transaction.amount), 0),
        func.count(Transaction.id)
    ).filter(Transaction.budget_id == budget.id).one()

    response = BudgetWithSpend.model_validate(budget)
    response.total_spend = float(total_spend or 0)
    response.total_transactions = int(count or 0)
    return response


@router.get("", response_model=List[BudgetWithSpend])
def list_budgets(
    owner: str = Query(..., description="Owner email"),
    db: Session = Depends(get_db)
):
    """List an owner's budgets with their spending."""
    budgets = db.query(Budget).filter(
        Budget.created_by == owner
    ).order_by(Budget.created_at.desc()).all()

    return [_with_spend(db, b) for b in budgets]


@router.post("", response_model=BudgetResponse, status_code=201)
def create_budget(
    budget: BudgetCreate,
    db: Session = Depends(get_db)
):
    """Create a new budget."""
    db_budget = Budget(
        name=budget.name,
        amount=budget.amount,
        category=budget.category,
        icon=budget.icon,
        created_by=budget.created_by,
    )
    db.add(db_budget)
    commit(db)
    db.refresh(db_budget)
    return db_budget


@router.get("/{budget_id}", response_model=BudgetWithSpend)
def get_budget(
    budget_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific budget."""
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return _with_spend(db, budget)


@router.patch("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: str,
    budget_update: BudgetUpdate,
    db: Session = Depends(get_db)
):
    """Update a budget."""
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")

    update_data = budget_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if field in ("name", "amount") and value is None:
            continue
        setattr(budget, field, value)

    commit(db)
    db.refresh(budget)
    return budget

"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pennywise.dependencies import get_db
from pennywise.schemas.dashboard import FinancialSnapshot
from pennywise.services.financial_data_service import get_financial_snapshot

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/snapshot", response_model=FinancialSnapshot)
def get_snapshot(
    owner: str = Query(..., description="Owner email"),
    db: Session = Depends(get_db)
):
    """
    Get the financial snapshot for the dashboard.
    Returns: summary, budgets, recent_transactions, category_spending, monthly_spending, insights
    """
    return get_financial_snapshot(db, owner)

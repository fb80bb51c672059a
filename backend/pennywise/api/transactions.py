"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime

from pennywise.dependencies import get_db
from pennywise.database import commit
from pennywise.exceptions import ValidationError
from pennywise.models import Budget, Transaction
from pennywise.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
    FrequencyOption,
)
from pennywise.services import recurring_service

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    owner: str = Query(..., description="Owner email"),
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=100),
    budget_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List an owner's transactions, newest first, with pagination"""
    query = db.query(Transaction).join(
        Budget, Budget.id == Transaction.budget_id
    ).filter(Budget.created_by == owner)

    if budget_id:
        query = query.filter(Transaction.budget_id == budget_id)

    total = query.count()

    query = query.order_by(Transaction.created_at.desc())
    query = query.offset((page - 1) * per_page).limit(per_page)

    transactions = query.all()
    pages = (total + per_page - 1) // per_page

    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in transactions],
        total=total,
        page=page,
        pages=pages
    )


@router.get("/frequencies", response_model=List[FrequencyOption])
def list_frequencies():
    """Recurring frequency options"""
    return recurring_service.get_recurring_frequencies()


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Get a single transaction"""
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreate,
    db: Session = Depends(get_db)
):
    """Log a transaction against a budget; recurring ones get a next due date"""
    budget = db.query(Budget).filter(Budget.id == data.budget_id).first()
    if not budget:
        raise ValidationError(f"Budget {data.budget_id} does not exist")

    transaction = Transaction(
        name=data.name,
        amount=data.amount,
        budget_id=budget.id,
        category=data.category,
        recurring=data.recurring,
        created_at=datetime.utcnow(),
    )
    recurring_service.apply_recurrence(transaction)

    db.add(transaction)
    commit(db)
    db.refresh(transaction)

    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    update: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Update a transaction; changing the frequency reschedules it from now"""
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    update_data = update.model_dump(exclude_unset=True)
    recurring_changed = (
        "recurring" in update_data
        and update_data["recurring"] is not None
        and update_data["recurring"] != transaction.recurring
    )

    for field, value in update_data.items():
        if value is None and field != "category":
            continue
        setattr(transaction, field, value)

    if recurring_changed:
        recurring_service.apply_recurrence(transaction, datetime.utcnow())

    commit(db)
    db.refresh(transaction)

    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Delete a transaction"""
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    db.delete(transaction)
    commit(db)

    return {"deleted": True}

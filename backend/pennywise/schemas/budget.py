"""
Budget Pydantic schemas for API validation.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pennywise.schemas.transaction import strip_name


class BudgetBase(BaseModel):
    """Base budget schema."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., ge=0)
    category: Optional[str] = Field(None, max_length=100)
    icon: Optional[str] = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return strip_name(value)


class BudgetCreate(BudgetBase):
    """Schema for creating a budget."""
    created_by: EmailStr


class BudgetUpdate(BaseModel):
    """Schema for updating a budget."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[Decimal] = Field(None, ge=0)
    category: Optional[str] = Field(None, max_length=100)
    icon: Optional[str] = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return strip_name(value)


class BudgetResponse(BudgetBase):
    """Schema for budget response."""
    id: str
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True


class BudgetWithSpend(BudgetResponse):
    """Budget with its aggregated spending."""
    total_spend: float = 0
    total_transactions: int = 0

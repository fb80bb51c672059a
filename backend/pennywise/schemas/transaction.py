"""
Transaction schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from pennywise.models.transaction import Recurrence


def strip_name(value: Optional[str]) -> Optional[str]:
    """Strip a display name, rejecting one that is only whitespace."""
    if value is None:
        return None
    if not value.strip():
        raise ValueError("Name is required")
    return value.strip()


class TransactionBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., gt=0)
    category: Optional[str] = Field(None, max_length=100)
    recurring: Recurrence = Recurrence.none

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return strip_name(value)

    @field_validator("recurring", mode="before")
    @classmethod
    def normalize_recurring(cls, value):
        if value is None:
            return Recurrence.none
        if isinstance(value, str):
            return value.strip().lower()
        return value


class TransactionCreate(TransactionBase):
    budget_id: str


class TransactionUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(None, gt=0)
    category: Optional[str] = Field(None, max_length=100)
    recurring: Optional[Recurrence] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return strip_name(value)

    @field_validator("recurring", mode="before")
    @classmethod
    def normalize_recurring(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class TransactionResponse(BaseModel):
    id: str
    name: str
    amount: Decimal
    budget_id: str
    category: Optional[str]
    recurring: Recurrence
    next_due_date: Optional[datetime]
    last_reminder_sent: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int
    page: int
    pages: int


class FrequencyOption(BaseModel):
    value: str
    label: str

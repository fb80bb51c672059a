"""Pydantic schemas for the AI advisor."""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict, Any


class InsightRequest(BaseModel):
    """Request for AI insights on a user's finances."""
    owner: EmailStr
    question: Optional[str] = Field(None, max_length=1000)


class AdvisorResponse(BaseModel):
    """Result of an insight generation call."""
    success: bool
    response: Optional[str] = None
    error: Optional[str] = None
    provider: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None


class QuickTipsResponse(BaseModel):
    """Result of a quick tips call."""
    success: bool
    tips: List[str]
    provider: Optional[str] = None

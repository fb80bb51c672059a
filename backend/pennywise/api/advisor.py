"""API endpoints for the AI financial advisor."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pennywise.dependencies import get_db, get_completion_provider, CompletionProvider
from pennywise.schemas.advisor import InsightRequest, AdvisorResponse, QuickTipsResponse
from pennywise.services import ai_service
from pennywise.services.financial_data_service import get_financial_snapshot

router = APIRouter(prefix="/advisor", tags=["advisor"])


@router.post("/insights", response_model=AdvisorResponse)
async def get_insights(
    request: InsightRequest,
    db: Session = Depends(get_db),
    provider: CompletionProvider = Depends(get_completion_provider)
):
    """Answer a question about the owner's finances, or analyze them."""
    snapshot = get_financial_snapshot(db, request.owner)
    return await ai_service.generate_financial_insights(
        snapshot, request.question, provider=provider
    )


@router.get("/tips", response_model=QuickTipsResponse)
async def get_quick_tips(
    owner: str = Query(..., description="Owner email"),
    db: Session = Depends(get_db),
    provider: CompletionProvider = Depends(get_completion_provider)
):
    """Quick one-line tips for the owner."""
    snapshot = get_financial_snapshot(db, owner)
    return await ai_service.generate_quick_tips(snapshot, provider=provider)

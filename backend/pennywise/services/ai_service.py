from typing import List, Optional
import logging
import re

from pennywise.ai.client import CompletionProvider, MockProvider, get_completion_provider
from pennywise.ai.local_advisor import FALLBACK_TIPS, respond
from pennywise.ai.prompts import (
    ADVISOR_SYSTEM, NEW_USER_CONTEXT, DATA_CONTEXT, QUESTION_CONTEXT, ANALYSIS_REQUEST,
    QUICK_TIPS_SYSTEM, QUICK_TIPS_CONTEXT, QUICK_TIPS_REQUEST,
)
from pennywise.config import settings
from pennywise.schemas.advisor import AdvisorResponse, QuickTipsResponse
from pennywise.schemas.dashboard import FinancialSnapshot

logger = logging.getLogger(__name__)

MAX_TIPS = 5
_BULLET = re.compile(r"^\s*(?:[-•*]|\d+[.)])\s*")


def _lines(items: List[str], empty: str) -> str:
    return "\n".join(items) if items else empty


def build_data_context(snapshot: FinancialSnapshot) -> str:
    """Render the snapshot as the text the model reasons over."""
    if not snapshot.has_data:
        return NEW_USER_CONTEXT

    currency = settings.currency_symbol
    summary = snapshot.summary

    budget_lines = [
        f"- {b.name} ({b.category or 'No category'}): {currency}{b.total_spend:.2f}/{currency}{b.amount:.2f} "
        f"({b.utilization_percentage:.1f}% used)"
        for b in snapshot.budgets
    ]
    category_lines = [
        f"- {c.category}: {currency}{c.total_amount:.2f} ({c.transaction_count} transactions)"
        for c in snapshot.category_spending
    ]
    transaction_lines = [
        f"- {t.name}: {currency}{t.amount:.2f} ({t.category or 'No category'}) - {t.created_at:%Y-%m-%d}"
        for t in snapshot.recent_transactions[:10]
    ]
    monthly_lines = [
        f"- {m.month}: {currency}{m.total_amount:.2f}"
        for m in snapshot.monthly_spending
    ]

    return DATA_CONTEXT.format(
        currency=currency,
        total_budget=summary.total_budget,
        total_spent=summary.total_spent,
        remaining_budget=summary.remaining_budget,
        utilization=summary.budget_utilization_percentage,
        total_transactions=summary.total_transactions,
        average_transaction=summary.average_transaction_amount,
        budget_lines=_lines(budget_lines, "No budgets created yet"),
        category_lines=_lines(category_lines, "No spending categories yet"),
        transaction_lines=_lines(transaction_lines, "No recent transactions"),
        monthly_lines=_lines(monthly_lines, "No spending history yet"),
    )


def build_insight_messages(snapshot: FinancialSnapshot, question: Optional[str] = None) -> List[dict]:
    system = ADVISOR_SYSTEM.format(currency=settings.currency_symbol)
    context = build_data_context(snapshot)

    if question:
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": f"{context}\n\n{QUESTION_CONTEXT}"},
            {"role": "user", "content": question},
        ]
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": context},
        {"role": "user", "content": ANALYSIS_REQUEST},
    ]


async def generate_financial_insights(
    snapshot: FinancialSnapshot,
    question: Optional[str] = None,
    provider: Optional[CompletionProvider] = None
) -> AdvisorResponse:
    """
    Answer a question about the user's finances, or give a general analysis.

    A failing provider is replaced by the offline advisor, so this only
    reports success=False for errors outside the provider call.
    """
    question = question.strip() if question else None

    try:
        provider = provider or get_completion_provider()
        messages = build_insight_messages(snapshot, question)

        try:
            if isinstance(provider, MockProvider):
                completion = provider.answer(question, snapshot)
            else:
                completion = await provider.complete(
                    messages,
                    max_tokens=settings.ai_max_tokens,
                    temperature=settings.ai_temperature
                )
            return AdvisorResponse(
                success=True,
                response=completion.content,
                usage=completion.usage,
                provider=completion.provider,
            )
        except Exception as e:
            logger.warning(f"Primary AI provider failed, falling back to mock: {e}")

        content = respond(question, snapshot)
        return AdvisorResponse(
            success=True,
            response=content,
            usage={"total_tokens": len(content) // 4},
            provider=f"{provider.name}-fallback-mock",
        )

    except Exception as e:
        logger.exception("Error generating AI insights")
        return AdvisorResponse(
            success=False,
            error=str(e),
            response="I'm sorry, I couldn't analyze your financial data at the moment. Please try again later.",
        )


def parse_tips(content: str) -> List[str]:
    """One tip per non-empty line, without bullets or heading lines."""
    tips = []
    for line in content.splitlines():
        tip = _BULLET.sub("", line).strip()
        if not tip or tip.endswith(":"):
            continue
        tips.append(tip)
    return tips[:MAX_TIPS]


async def generate_quick_tips(
    snapshot: FinancialSnapshot,
    provider: Optional[CompletionProvider] = None
) -> QuickTipsResponse:
    """Short one-line tips. Never reports failure; falls back to fixed tips."""
    provider = provider or get_completion_provider()

    top_categories = ", ".join(c.category for c in snapshot.category_spending[:3]) or "None yet"
    overspent = sum(1 for b in snapshot.budgets if b.utilization_percentage > 100)
    context = QUICK_TIPS_CONTEXT.format(
        utilization=snapshot.summary.budget_utilization_percentage,
        top_categories=top_categories,
        overspent_count=overspent,
        currency=settings.currency_symbol,
        remaining_budget=snapshot.summary.remaining_budget,
    )
    messages = [
        {"role": "system", "content": QUICK_TIPS_SYSTEM},
        {"role": "user", "content": context},
        {"role": "user", "content": QUICK_TIPS_REQUEST},
    ]

    try:
        completion = await provider.complete(messages, max_tokens=300, temperature=0.8)
        tips = parse_tips(completion.content)
        if tips:
            return QuickTipsResponse(success=True, tips=tips, provider=completion.provider)
        logger.warning(f"AI provider {provider.name} returned no tips")
    except Exception as e:
        logger.warning(f"Quick tips generation failed: {e}")

    return QuickTipsResponse(
        success=True,
        tips=list(FALLBACK_TIPS),
        provider=f"{provider.name}-fallback",
    )

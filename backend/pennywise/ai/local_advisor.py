"""
Offline advisor used by the mock provider and as the fallback when a real
provider fails.

Answers come from a fixed rule table keyed on words in the question. Only
DEFAULT_TIP_POOL is sampled at random; everything else is deterministic for a
given question and snapshot.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from pennywise.config import settings
from pennywise.schemas.dashboard import FinancialSnapshot

FALLBACK_TIPS = [
    "Track your spending regularly to stay within budget",
    "Consider setting up automatic savings transfers",
    "Review and adjust your budgets monthly",
]

# Randomized pool
DEFAULT_TIP_POOL = [
    "Use the 'cost per use' method: divide an item's price by how often you expect to use it",
    "Pay yourself first by moving money to savings as soon as you get paid",
    "Set a spending alert at 75% of each budget so you can slow down in time",
    "Shop from a list and stick to it; impulse purchases drive most overspending",
    "Schedule a 15 minute weekly review of your expenses and celebrate the wins",
]


@dataclass
class _Facts:
    """What the canned answers know about the user."""
    has_data: bool
    top_category: Optional[str]
    utilization: float
    remaining: float
    overspent: List[str]


def _facts(snapshot: Optional[FinancialSnapshot]) -> _Facts:
    if snapshot is None:
        return _Facts(False, None, 0.0, 0.0, [])
    top = max(snapshot.category_spending, key=lambda c: c.total_amount, default=None)
    return _Facts(
        has_data=snapshot.has_data,
        top_category=top.category if top else None,
        utilization=snapshot.summary.budget_utilization_percentage,
        remaining=snapshot.summary.remaining_budget,
        overspent=[b.name for b in snapshot.budgets if b.utilization_percentage > 100],
    )


def _money(amount: float) -> str:
    return f"{settings.currency_symbol}{amount:,.2f}"


def _saving(facts: _Facts, rng: random.Random) -> str:
    focus = (
        f"• Your biggest category is {facts.top_category}; trimming it by 10% is the quickest win\n"
        if facts.top_category else
        "• Start by tracking every expense for a month to see where money goes\n"
    )
    return (
        "Great question about saving money! Here are some personalized tips:\n\n"
        "💰 **Immediate Actions:**\n"
        "• Review your subscription services and cancel unused ones\n"
        "• Try the 24-hour rule before non-essential purchases\n"
        "• Set up automatic transfers to savings, even small amounts help\n\n"
        "📊 **Based on your spending patterns:**\n"
        f"{focus}"
        "• Use the envelope method for discretionary spending"
    )


def _overspending(facts: _Facts, rng: random.Random) -> str:
    if facts.overspent:
        watch = f"• Over budget: {', '.join(facts.overspent)}\n"
    elif facts.top_category:
        watch = f"• {facts.top_category} is where most of your money goes\n"
    else:
        watch = "• No budget is over its limit yet\n"
    return (
        "Let me analyze your spending patterns:\n\n"
        "⚠️ **Areas to watch:**\n"
        f"{watch}"
        f"• You have used {facts.utilization:.1f}% of your total budget\n\n"
        "💡 **Quick fixes:**\n"
        "• Set weekly spending alerts for problem categories\n"
        "• Try a 'no-spend' challenge for 3 days"
    )


def _biggest(facts: _Facts, rng: random.Random) -> str:
    if facts.top_category:
        headline = f"🏆 **Top expense category:** {facts.top_category}\n\n"
    else:
        headline = "🏆 You haven't logged enough spending to rank categories yet.\n\n"
    return (
        "Here's your spending breakdown:\n\n"
        f"{headline}"
        "🎯 **Action items:**\n"
        "• Set a weekly cap for your largest category\n"
        "• Find 2-3 free alternatives for discretionary spending"
    )


def _budget_review(facts: _Facts, rng: random.Random) -> str:
    return (
        "Let me evaluate your budget setup:\n\n"
        "✅ **What's working well:**\n"
        f"• Remaining budget: {_money(facts.remaining)}\n"
        "• You've allocated funds across your categories\n\n"
        "⚖️ **Areas for adjustment:**\n"
        "• Consider increasing your savings allocation by 5%\n"
        "• Add a 'miscellaneous' budget for unexpected expenses\n\n"
        "🔧 **Recommendations:**\n"
        "• Start with 80% of current budget targets\n"
        "• Adjust upward after 2-3 months of data"
    )


def _tips(facts: _Facts, rng: random.Random) -> str:
    picked = rng.sample(DEFAULT_TIP_POOL, 3)
    return "Here are a few quick tips:\n" + "\n".join(f"- {tip}" for tip in picked)


def _general(facts: _Facts, rng: random.Random) -> str:
    if not facts.has_data:
        return (
            "Welcome! Here is some general guidance to get started. 💰\n\n"
            "• Create a budget for each of your main spending areas\n"
            "• Log every expense so your spending patterns become visible\n"
            "• Aim to save a fixed share of every paycheck\n\n"
            "💬 **Ask me about:**\n"
            "• Saving strategies • Budget optimization • Expense analysis"
        )
    top = facts.top_category or "not enough data yet"
    return (
        "I'm here to help with your financial questions! 💰\n\n"
        "📊 **Your Financial Snapshot:**\n"
        f"• Budget utilization: {facts.utilization:.1f}%\n"
        f"• Remaining budget: {_money(facts.remaining)}\n"
        f"• Top category: {top}\n\n"
        "🎯 **General guidance:**\n"
        "• Review your spending patterns weekly\n"
        "• Consider automating your savings\n"
        "• Track daily expenses for better insights"
    )


Rule = Tuple[Tuple[str, ...], Callable[[_Facts, random.Random], str]]

RULES: List[Rule] = [
    (("save", "saving"), _saving),
    (("overspend", "exceed"), _overspending),
    (("biggest", "largest"), _biggest),
    (("realistic", "budget"), _budget_review),
    (("tip", "advice", "help"), _tips),
]


def respond(
    question: Optional[str],
    snapshot: Optional[FinancialSnapshot] = None,
    rng: Optional[random.Random] = None
) -> str:
    """Answer a question, or summarize the snapshot when there is none."""
    facts = _facts(snapshot)
    rng = rng or random.Random()
    text = (question or "").lower()

    for keywords, build in RULES:
        if any(keyword in text for keyword in keywords):
            return build(facts, rng)
    return _general(facts, rng)

"""AI prompt templates."""

from pennywise.ai.prompts.advisor import (
    ADVISOR_SYSTEM,
    NEW_USER_CONTEXT,
    DATA_CONTEXT,
    QUESTION_CONTEXT,
    ANALYSIS_REQUEST,
)
from pennywise.ai.prompts.quick_tips import (
    QUICK_TIPS_SYSTEM,
    QUICK_TIPS_CONTEXT,
    QUICK_TIPS_REQUEST,
)

__all__ = [
    "ADVISOR_SYSTEM",
    "NEW_USER_CONTEXT",
    "DATA_CONTEXT",
    "QUESTION_CONTEXT",
    "ANALYSIS_REQUEST",
    "QUICK_TIPS_SYSTEM",
    "QUICK_TIPS_CONTEXT",
    "QUICK_TIPS_REQUEST",
]

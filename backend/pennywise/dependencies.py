"""
FastAPI dependencies.
"""

from pennywise.ai.client import CompletionProvider, get_completion_provider
from pennywise.database import get_db
from pennywise.services.email_service import Mailer, get_mailer

__all__ = [
    "get_db",
    "get_mailer",
    "get_completion_provider",
    "CompletionProvider",
    "Mailer",
]

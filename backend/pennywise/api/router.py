"""
Main API router.
"""

from fastapi import APIRouter
from pennywise.api import budgets, transactions, dashboard, advisor, reminders, settings

api_router = APIRouter()

api_router.include_router(budgets.router)
api_router.include_router(transactions.router)
api_router.include_router(dashboard.router)
api_router.include_router(advisor.router)
api_router.include_router(reminders.router)
api_router.include_router(settings.router)

"""
Bank Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bank_ledger.config import get_settings
from bank_ledger.observability import setup_logging
from bank_ledger.api.health import router as health_router
from bank_ledger.api.accounts import router as accounts_router

settings = get_settings()

setup_logging(
    "DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
    environment=settings.ENVIRONMENT,
)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Single-ledger account bookkeeping over a JSON file store",
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)

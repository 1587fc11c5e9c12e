from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from app.core.config import Settings, settings
from app.utils.aggregator import TransactionAggregator
from app.utils.ynab_client import YNABClient


def get_settings() -> Settings:
    return settings


def get_authorization(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Opaque credential: forwarded to YNAB unchanged, never validated or stored."""
    return authorization


def get_ynab_client(request: Request) -> YNABClient:
    # Opened in the app lifespan
    return request.app.state.ynab_client


def get_aggregator(settings: Settings = Depends(get_settings)) -> TransactionAggregator:
    return TransactionAggregator(
        misc_label=settings.MISC_PAYEE_LABEL,
        min_payee_occurrences=settings.MIN_PAYEE_OCCURRENCES,
    )


def get_account_id(settings: Settings = Depends(get_settings)) -> str:
    if not settings.YNAB_ACCOUNT_ID:
        raise HTTPException(status_code=500, detail="YNAB_ACCOUNT_ID is not configured")
    return settings.YNAB_ACCOUNT_ID

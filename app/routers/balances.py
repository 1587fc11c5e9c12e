import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core.config import Settings
from app.core.dependencies import get_authorization, get_settings, get_ynab_client
from app.models.dashboard import AccountBalance
from app.utils.aggregator import MILLIUNITS_PER_UNIT
from app.utils.ynab_client import YNABClient, YNABError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.api_route("/balances", methods=["GET", "POST"], response_model=List[AccountBalance])
def list_balances(
    authorization: Optional[str] = Depends(get_authorization),
    ynab: YNABClient = Depends(get_ynab_client),
    settings: Settings = Depends(get_settings),
) -> List[AccountBalance]:
    """
    Current balance of every account in the budget, formatted as dollars.
    The YNAB rate limit header is appended as an extra pseudo-account row.
    """
    try:
        accounts, rate_limit = ynab.get_accounts(authorization)
    except YNABError as e:
        logger.error(f"Error fetching balances: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    balances = [
        AccountBalance(name=account.name, amount=f"${account.balance / MILLIUNITS_PER_UNIT:.2f}")
        for account in accounts
    ]
    balances.append(AccountBalance(name=settings.RATE_LIMIT_LABEL, amount=rate_limit))
    return balances

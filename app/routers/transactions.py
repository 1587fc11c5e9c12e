import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_account_id, get_aggregator, get_authorization, get_ynab_client
from app.utils.aggregator import TransactionAggregator
from app.utils.ynab_client import YNABClient, YNABError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.api_route("/transactions", methods=["GET", "POST"])
def running_balance(
    authorization: Optional[str] = Depends(get_authorization),
    account_id: str = Depends(get_account_id),
    ynab: YNABClient = Depends(get_ynab_client),
    aggregator: TransactionAggregator = Depends(get_aggregator),
) -> List[Dict]:
    """
    Daily running balance of the configured account, newest date first.
    """
    try:
        account = ynab.get_account(authorization, account_id)
        transactions = ynab.get_transactions(authorization, account_id)
        scheduled = ynab.get_scheduled_transactions(authorization)
    except YNABError as e:
        logger.error(f"Error fetching transactions for running balance: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        f"Balance: {account.balance}, transactions: {len(transactions)}, "
        f"scheduled transactions: {len(scheduled)}"
    )

    points = aggregator.running_balance(account.balance, transactions)
    return [point.to_dict() for point in points]


@router.api_route("/transactions-by-payee", methods=["GET", "POST"])
def transactions_by_payee(
    authorization: Optional[str] = Depends(get_authorization),
    account_id: str = Depends(get_account_id),
    ynab: YNABClient = Depends(get_ynab_client),
    aggregator: TransactionAggregator = Depends(get_aggregator),
) -> List[Dict]:
    """
    Monthly totals per payee; payees seen only once are grouped under "Misc".
    """
    try:
        transactions = ynab.get_transactions(authorization, account_id)
    except YNABError as e:
        logger.error(f"Error fetching transactions for payee summary: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    summary = aggregator.payee_month_summary(transactions)
    return [row.to_dict() for row in summary]

"""
YNAB API Client
Synchronous wrapper around the YNAB REST API used by the dashboard routers.
The caller's Authorization header is forwarded as-is and never inspected.
"""
import logging
from typing import List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.core.config import Settings
from app.models.ynab import (
    AccountResponse,
    AccountsResponse,
    ScheduledTransactionsResponse,
    TransactionsResponse,
    YNABAccount,
    YNABScheduledTransaction,
    YNABTransaction,
)

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class YNABError(Exception):
    """Raised when a YNAB request fails or its response cannot be decoded."""


class YNABClient:
    def __init__(
        self,
        base_url: str,
        budget_id: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.budget_id = budget_id
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "YNABClient":
        return cls(
            settings.YNAB_BASE_URL,
            settings.YNAB_BUDGET_ID,
            timeout=settings.YNAB_TIMEOUT_SECONDS,
        )

    def close(self) -> None:
        self._client.close()

    def _get(
        self,
        path: str,
        authorization: Optional[str],
        model: Type[ResponseModel],
    ) -> Tuple[ResponseModel, httpx.Response]:
        headers = {"Authorization": authorization} if authorization else {}
        logger.debug(f"GET {path}")

        try:
            response = self._client.get(path, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"YNAB request to {path} failed: {str(e)}")
            raise YNABError(f"YNAB request to {path} failed: {str(e)}") from e

        if response.is_error:
            message = f"YNAB request to {path} failed with status {response.status_code}"
            detail = _error_detail(response)
            if detail:
                message = f"{message}: {detail}"
            logger.error(message)
            raise YNABError(message)

        try:
            return model.model_validate(response.json()), response
        except (ValueError, ValidationError) as e:
            logger.error(f"Could not decode YNAB response from {path}: {str(e)}")
            raise YNABError(f"Could not decode YNAB response from {path}: {str(e)}") from e

    def get_accounts(self, authorization: Optional[str]) -> Tuple[List[YNABAccount], str]:
        """
        List every account of the budget.
        Also returns the X-Rate-Limit header (e.g. "36/200"), or "" if YNAB did not send one.
        """
        body, response = self._get(f"budgets/{self.budget_id}/accounts", authorization, AccountsResponse)
        return body.data.accounts, response.headers.get("X-Rate-Limit", "")

    def get_account(self, authorization: Optional[str], account_id: str) -> YNABAccount:
        body, _ = self._get(
            f"budgets/{self.budget_id}/accounts/{account_id}", authorization, AccountResponse
        )
        return body.data.account

    def get_transactions(self, authorization: Optional[str], account_id: str) -> List[YNABTransaction]:
        body, _ = self._get(
            f"budgets/{self.budget_id}/accounts/{account_id}/transactions",
            authorization,
            TransactionsResponse,
        )
        return body.data.transactions

    def get_scheduled_transactions(self, authorization: Optional[str]) -> List[YNABScheduledTransaction]:
        body, _ = self._get(
            f"budgets/{self.budget_id}/scheduled_transactions",
            authorization,
            ScheduledTransactionsResponse,
        )
        return body.data.scheduled_transactions


def _error_detail(response: httpx.Response) -> Optional[str]:
    # YNAB errors look like {"error": {"id": "401", "name": "unauthorized", "detail": "..."}}
    try:
        error = response.json().get("error") or {}
    except (ValueError, AttributeError):
        return None
    if not isinstance(error, dict):
        return None
    return error.get("detail")

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel


class YNABAccount(BaseModel):
    id: Optional[str] = None
    name: str
    balance: int  # milliunits
    cleared_balance: Optional[int] = None
    uncleared_balance: Optional[int] = None


class YNABTransaction(BaseModel):
    date: dt.date
    amount: int  # milliunits (1000 = $1.00)
    payee_name: Optional[str] = None
    account_name: Optional[str] = None
    category_name: Optional[str] = None


class YNABScheduledTransaction(BaseModel):
    """Not aggregated yet; only counted when building the running balance."""

    date_first: dt.date
    date_next: Optional[dt.date] = None
    frequency: Optional[str] = None
    account_id: Optional[str] = None
    amount: int


# Response envelopes: YNAB wraps every payload in {"data": {...}}

class AccountsData(BaseModel):
    accounts: List[YNABAccount]


class AccountsResponse(BaseModel):
    data: AccountsData


class AccountData(BaseModel):
    account: YNABAccount


class AccountResponse(BaseModel):
    data: AccountData


class TransactionsData(BaseModel):
    transactions: List[YNABTransaction]


class TransactionsResponse(BaseModel):
    data: TransactionsData


class ScheduledTransactionsData(BaseModel):
    scheduled_transactions: List[YNABScheduledTransaction]


class ScheduledTransactionsResponse(BaseModel):
    data: ScheduledTransactionsData

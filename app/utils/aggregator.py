from __future__ import annotations

import datetime as dt
from collections import Counter, defaultdict
from dataclasses import dataclass
from itertools import groupby
from operator import attrgetter
from typing import Any, Dict, List, Sequence, Tuple

from app.models.ynab import YNABTransaction

MILLIUNITS_PER_UNIT = 1000.0


def to_timestamp(day: dt.date) -> str:
    """Midnight UTC ISO-8601 timestamp, the format the dashboard expects."""
    return f"{day.isoformat()}T00:00:00Z"


def month_start(day: dt.date) -> dt.date:
    return day.replace(day=1)


@dataclass(frozen=True)
class RunningBalancePoint:
    """Account balance at the end of a given day, in milliunits."""

    date: dt.date
    balance: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": to_timestamp(self.date),
            "balance": self.balance / MILLIUNITS_PER_UNIT,
        }


@dataclass(frozen=True)
class PayeeMonthSummary:
    """Total spent with one payee (or the misc bucket) in one month, in milliunits."""

    month: dt.date
    payee: str
    amount: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": to_timestamp(self.month),
            "amount": self.amount / MILLIUNITS_PER_UNIT,
            "payee": self.payee,
        }


class TransactionAggregator:
    """
    Pure aggregation over already-decoded YNAB transactions.
    All sums are kept in integer milliunits; conversion to currency units only
    happens in the result records' to_dict().
    """

    def __init__(self, misc_label: str = "Misc", min_payee_occurrences: int = 2) -> None:
        self._misc_label = misc_label
        self._min_payee_occurrences = min_payee_occurrences

    def running_balance(
        self,
        current_balance: int,
        transactions: Sequence[YNABTransaction],
    ) -> List[RunningBalancePoint]:
        """
        Reconstruct the daily balance history by walking backwards from the
        current balance, one point per distinct date, newest first.
        """
        newest_first = sorted(transactions, key=attrgetter("date"), reverse=True)

        points: List[RunningBalancePoint] = []
        balance = current_balance
        for day, day_transactions in groupby(newest_first, key=attrgetter("date")):
            points.append(RunningBalancePoint(date=day, balance=balance))
            # Traveling backwards, so subtract
            balance -= sum(tx.amount for tx in day_transactions)
        return points

    def payee_month_summary(self, transactions: Sequence[YNABTransaction]) -> List[PayeeMonthSummary]:
        """
        Sum amounts per month and payee. Payees seen fewer than
        min_payee_occurrences times in the whole input are folded into the
        misc label rather than dropped.
        """
        payee_counts = Counter(_payee(tx) for tx in transactions)

        grouped: Dict[Tuple[dt.date, str], int] = defaultdict(int)
        for tx in transactions:
            payee = _payee(tx)
            if payee_counts[payee] < self._min_payee_occurrences:
                payee = self._misc_label
            grouped[(month_start(tx.date), payee)] += tx.amount

        return [
            PayeeMonthSummary(month=month, payee=payee, amount=amount)
            for (month, payee), amount in sorted(grouped.items())
        ]


def _payee(tx: YNABTransaction) -> str:
    return tx.payee_name or ""

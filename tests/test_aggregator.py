import datetime as dt

from app.models.ynab import YNABTransaction
from app.utils.aggregator import (
    PayeeMonthSummary,
    RunningBalancePoint,
    TransactionAggregator,
    month_start,
    to_timestamp,
)


def tx(date: str, amount: int, payee: str = "Grocer") -> YNABTransaction:
    return YNABTransaction(date=date, amount=amount, payee_name=payee)


sample_transactions = [
    tx("2024-03-02", -12000, "Grocer"),
    tx("2024-03-10", -400, "Coffee Shop"),
    tx("2024-02-28", 250000, "Employer"),
    tx("2024-03-15", -8000, "Grocer"),
    tx("2024-02-11", -1500, "Bookstore"),
    tx("2024-03-28", 250000, "Employer"),
    tx("2024-02-14", -3500, "Grocer"),
]


def test_running_balance_scenario():
    transactions = [
        tx("2024-01-05", -5000),
        tx("2024-01-05", -3000),
        tx("2024-01-03", 2000),
    ]
    points = TransactionAggregator().running_balance(10000, transactions)
    assert [p.to_dict() for p in points] == [
        {"date": "2024-01-05T00:00:00Z", "balance": 10.0},
        {"date": "2024-01-03T00:00:00Z", "balance": 18.0},
    ]


def test_running_balance_empty():
    assert TransactionAggregator().running_balance(123456, []) == []


def test_running_balance_single_day():
    transactions = [tx("2024-06-01", -1000), tx("2024-06-01", 500), tx("2024-06-01", -250)]
    points = TransactionAggregator().running_balance(42000, transactions)
    assert points == [RunningBalancePoint(date=dt.date(2024, 6, 1), balance=42000)]


def test_running_balance_sorts_newest_first():
    points = TransactionAggregator().running_balance(500000, sample_transactions)
    dates = [p.date for p in points]
    assert dates == sorted(dates, reverse=True)
    assert len(dates) == len(set(dates))


def test_running_balance_deltas_reconstruct_current_balance():
    current = 500000
    points = TransactionAggregator().running_balance(current, sample_transactions)

    # The newest point is the current balance
    assert points[0].balance == current

    # Each step back in time undoes exactly the newer day's transactions
    by_day = {}
    for t in sample_transactions:
        by_day[t.date] = by_day.get(t.date, 0) + t.amount
    for newer, older in zip(points, points[1:]):
        assert newer.balance - older.balance == by_day[newer.date]

    # Replaying every day's total on top of the opening balance lands on the current balance
    opening = points[-1].balance - by_day[points[-1].date]
    assert opening + sum(by_day.values()) == current


def test_running_balance_is_integer_milliunits():
    transactions = [tx("2024-01-02", -1), tx("2024-01-01", -1)]
    points = TransactionAggregator().running_balance(1, transactions)
    assert [p.balance for p in points] == [1, 2]
    assert points[1].to_dict()["balance"] == 0.002


def test_payee_summary_single_occurrence_becomes_misc():
    summary = TransactionAggregator().payee_month_summary(sample_transactions)
    rows = [s.to_dict() for s in summary]

    assert {"date": "2024-03-01T00:00:00Z", "payee": "Misc", "amount": -0.4} in rows
    assert all(row["payee"] not in {"Coffee Shop", "Bookstore"} for row in rows)


def test_payee_summary_groups_and_sorts():
    summary = TransactionAggregator().payee_month_summary(sample_transactions)
    assert summary == [
        PayeeMonthSummary(month=dt.date(2024, 2, 1), payee="Employer", amount=250000),
        PayeeMonthSummary(month=dt.date(2024, 2, 1), payee="Grocer", amount=-3500),
        PayeeMonthSummary(month=dt.date(2024, 2, 1), payee="Misc", amount=-1500),
        PayeeMonthSummary(month=dt.date(2024, 3, 1), payee="Employer", amount=250000),
        PayeeMonthSummary(month=dt.date(2024, 3, 1), payee="Grocer", amount=-20000),
        PayeeMonthSummary(month=dt.date(2024, 3, 1), payee="Misc", amount=-400),
    ]


def test_payee_summary_merges_once_only_payees_in_same_month():
    transactions = [tx("2024-05-03", -1000, "Cinema"), tx("2024-05-20", -2500, "Bakery")]
    summary = TransactionAggregator().payee_month_summary(transactions)
    assert summary == [PayeeMonthSummary(month=dt.date(2024, 5, 1), payee="Misc", amount=-3500)]


def test_payee_summary_preserves_total():
    summary = TransactionAggregator().payee_month_summary(sample_transactions)
    assert sum(s.amount for s in summary) == sum(t.amount for t in sample_transactions)


def test_payee_summary_custom_threshold_and_label():
    aggregator = TransactionAggregator(misc_label="Other", min_payee_occurrences=3)
    summary = aggregator.payee_month_summary(sample_transactions)
    payees = {s.payee for s in summary}
    assert payees == {"Grocer", "Other"}


def test_payee_summary_missing_payee_name():
    transactions = [
        YNABTransaction(date="2024-01-01", amount=-100),
        YNABTransaction(date="2024-01-09", amount=-200),
    ]
    summary = TransactionAggregator().payee_month_summary(transactions)
    assert summary == [PayeeMonthSummary(month=dt.date(2024, 1, 1), payee="", amount=-300)]


def test_payee_summary_empty():
    assert TransactionAggregator().payee_month_summary([]) == []


def test_date_helpers():
    assert month_start(dt.date(2024, 12, 31)) == dt.date(2024, 12, 1)
    assert to_timestamp(dt.date(2024, 3, 1)) == "2024-03-01T00:00:00Z"

"""
Cash Flow Aggregation.

Sums a client's credits and debits over a trailing window ending at the
analysis date. A transaction counts only if it is dated strictly after
the window start; one exactly on the boundary is excluded.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from credit_sync.domain.entities import Transaction
from credit_sync.utils.date_utils import subtract_months

from .settings import credit_settings


@dataclass(frozen=True)
class CashFlow:
    """Income and expenses over the analysis window."""

    income: float
    expenses: float

    @property
    def net(self) -> float:
        return self.income - self.expenses


def window_start(reference_date: date, window_months: int) -> date:
    """Get the (exclusive) first day of the trailing window."""
    return subtract_months(reference_date, window_months)


def aggregate_cash_flow(
    transactions: Iterable[Transaction],
    reference_date: date,
    window_months: int | None = None,
) -> CashFlow:
    """
    Aggregate credits and debits inside the trailing window.

    Args:
        transactions: Client transaction history
        reference_date: Analysis date the window ends at
        window_months: Window length (defaults to the configured 3 months)

    Returns:
        CashFlow with non-negative income and expenses
    """
    if window_months is None:
        window_months = credit_settings.cash_flow_window_months

    start = window_start(reference_date, window_months)

    income = 0.0
    expenses = 0.0
    for txn in transactions:
        if not txn.date > start:
            continue
        if txn.is_credit:
            income += txn.amount
        elif txn.is_debit:
            expenses += txn.amount

    return CashFlow(income=income, expenses=expenses)

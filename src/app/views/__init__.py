"""HTML views: presentational components and one page view per route."""

from .pages import (
    balances_page,
    debtee_page,
    debtors_page,
    expense_page,
    ledger_page,
    new_bill_page,
    not_found_page,
    participant_page,
)

__all__ = [
    "balances_page",
    "debtee_page",
    "debtors_page",
    "expense_page",
    "ledger_page",
    "new_bill_page",
    "not_found_page",
    "participant_page",
]

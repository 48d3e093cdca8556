"""Domain layer: errors, schemas and constants."""

from .errors import ErrorCodes, NobtError
from .schemas import (
    BalanceItem,
    DebtItem,
    DebtorItem,
    ExpenseDetail,
    ExpenseItem,
    NewBill,
    NewBillParameters,
    Nobt,
    ParticipantSummary,
)

__all__ = [
    "ErrorCodes",
    "NobtError",
    "BalanceItem",
    "DebtItem",
    "DebtorItem",
    "ExpenseDetail",
    "ExpenseItem",
    "NewBill",
    "NewBillParameters",
    "Nobt",
    "ParticipantSummary",
]

"""
Mock Provider: hard-coded sample ledger.

Serves the same sample nobt for every id. The sample can be replaced by a
YAML fixture with the same shape as ``SAMPLE_NOBT``.
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from src.domain.errors import ErrorCodes, NobtError
from src.domain.schemas import (
    BalanceItem,
    DebtItem,
    DebtorItem,
    ExpenseDetail,
    ExpenseItem,
    Nobt,
    ParticipantSummary,
)

from .base import NobtProvider

logger = logging.getLogger(__name__)

# =============================================================================
# Sample Data
# =============================================================================

SAMPLE_NOBT: dict[str, Any] = {
    "title": "Swedish Shenanigans",
    "currency": "EUR",
    "total": "1521.00",
    "participants": ["Thomas", "Simon", "Prada", "Benji"],
    "expenses": [
        {
            "id": 14,
            "name": "Flughafen Essen",
            "debtee": "Thomas",
            "amount": "39.00",
            "added_on": "28 August 2022",
            "deleted": False,
            "debtors": [
                {"name": "Simon", "amount_owed": "-19.50"},
                {"name": "Thomas", "amount_owed": "-19.50"},
            ],
        },
        {
            "id": 13,
            "name": "Benni Gutschein",
            "debtee": "Thomas",
            "amount": "150.00",
            "added_on": "27 August 2022",
            "deleted": True,
            "debtors": [
                {"name": "Simon", "amount_owed": "-50.00"},
                {"name": "Prada", "amount_owed": "-50.00"},
                {"name": "Thomas", "amount_owed": "-50.00"},
            ],
        },
        {
            "id": 12,
            "name": "Taxi zum Club",
            "debtee": "Prada",
            "amount": "33.00",
            "added_on": "26 August 2022",
            "deleted": False,
            "debtors": [
                {"name": "Prada", "amount_owed": "-11.00"},
                {"name": "Simon", "amount_owed": "-11.00"},
                {"name": "Benji", "amount_owed": "-11.00"},
            ],
        },
    ],
    "balances": [
        {"name": "Simon", "amount": "-99.66"},
        {"name": "Thomas", "amount": "390.34"},
        {"name": "Prada", "amount": "-290.68"},
        {"name": "Benji", "amount": "0.00"},
    ],
    "summary": {
        "bills_paid": 2,
        "paid_total": "1705.00",
        "bills_involved": 13,
        "bills_total": 14,
        "debts": [
            {"name": "Prada", "amount": "290.68"},
            {"name": "Simon", "amount": "99.66"},
        ],
    },
}


def _amount(value: Any, where: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise NobtError(ErrorCodes.FIXTURE_INVALID, field=where, value=value) from e
    if not amount.is_finite():
        raise NobtError(ErrorCodes.FIXTURE_INVALID, field=where, value=value)
    return amount


# =============================================================================
# Provider
# =============================================================================


class MockNobtProvider(NobtProvider):
    """
    Fixture-backed provider.

    Usage:
        provider = MockNobtProvider()
        provider = MockNobtProvider.from_yaml(Path("fixtures/nobt.yaml"))
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = data if data is not None else SAMPLE_NOBT
        self._validate()

    @classmethod
    def from_yaml(cls, path: Path) -> "MockNobtProvider":
        """
        Load a fixture file.

        Raises:
            NobtError: FIXTURE_INVALID if the file is unreadable or not a mapping
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise NobtError(ErrorCodes.FIXTURE_INVALID, path=str(path)) from e

        if not isinstance(data, dict):
            raise NobtError(ErrorCodes.FIXTURE_INVALID, path=str(path))

        logger.info(f"Loaded nobt fixture from {path}")
        return cls(data)

    def _validate(self) -> None:
        """Build every view model once so a broken fixture fails at startup."""
        try:
            self.get_nobt("_")
            self.get_balances("_")
            for name in self.data.get("participants", []):
                self.get_participant("_", name)
            for expense in self.data.get("expenses", []):
                self.get_expense("_", int(expense["id"]))
        except (KeyError, TypeError, ValueError) as e:
            raise NobtError(ErrorCodes.FIXTURE_INVALID, cause=str(e)) from e

    # -------------------------------------------------------------------------
    # NobtProvider
    # -------------------------------------------------------------------------

    def get_nobt(self, nobt_id: str) -> Nobt | None:
        expenses = [
            ExpenseItem(
                expense_id=int(e["id"]),
                description=f"{e['debtee']} paid '{e['name']}'",
                amount=_amount(e["amount"], "expenses.amount"),
                deleted=bool(e.get("deleted", False)),
            )
            for e in self.data.get("expenses", [])
        ]
        return Nobt(
            nobt_id=nobt_id,
            title=str(self.data["title"]),
            currency=str(self.data["currency"]),
            total=_amount(self.data["total"], "total"),
            participants=[str(p) for p in self.data.get("participants", [])],
            expenses=expenses,
        )

    def get_balances(self, nobt_id: str) -> list[BalanceItem] | None:
        return [
            BalanceItem(name=str(b["name"]), amount=_amount(b["amount"], "balances.amount"))
            for b in self.data.get("balances", [])
        ]

    def get_participant(self, nobt_id: str, name: str) -> ParticipantSummary | None:
        if name not in self.data.get("participants", []):
            return None

        summary = self.data["summary"]
        debts = [
            DebtItem(name=str(d["name"]), amount=_amount(d["amount"], "summary.debts.amount"))
            for d in summary.get("debts", [])
            if d["name"] != name
        ]
        return ParticipantSummary(
            name=name,
            bills_paid=int(summary["bills_paid"]),
            paid_total=_amount(summary["paid_total"], "summary.paid_total"),
            bills_involved=int(summary["bills_involved"]),
            bills_total=int(summary["bills_total"]),
            debts=debts,
        )

    def get_expense(self, nobt_id: str, expense_id: int) -> ExpenseDetail | None:
        for e in self.data.get("expenses", []):
            if int(e["id"]) != expense_id:
                continue
            return ExpenseDetail(
                expense_id=expense_id,
                name=str(e["name"]),
                debtee=str(e["debtee"]),
                added_on=str(e.get("added_on", "")),
                total=_amount(e["amount"], "expenses.amount"),
                deleted=bool(e.get("deleted", False)),
                debtors=[
                    DebtorItem(
                        name=str(d["name"]),
                        amount_owed=_amount(d["amount_owed"], "expenses.debtors.amount_owed"),
                    )
                    for d in e.get("debtors", [])
                ],
            )
        return None

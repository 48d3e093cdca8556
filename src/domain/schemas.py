"""
View-model schemas.

Every structure here is built per request, handed to a page view and
dropped with the response. Amounts are Decimal, never float.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

# =============================================================================
# Ledger
# =============================================================================

@dataclass
class ExpenseItem:
    """One row of the ledger overview."""
    expense_id: int
    description: str
    amount: Decimal
    deleted: bool = False


@dataclass
class Nobt:
    """A shared expense ledger as shown on its overview page."""
    nobt_id: str
    title: str
    currency: str
    total: Decimal
    participants: list[str] = field(default_factory=list)
    expenses: list[ExpenseItem] = field(default_factory=list)

    @property
    def num_participants(self) -> int:
        return len(self.participants)


# =============================================================================
# Balances
# =============================================================================

@dataclass
class BalanceItem:
    """Balance of one participant (positive: is owed money)."""
    name: str
    amount: Decimal


@dataclass
class DebtItem:
    """Amount one participant owes to ``name``."""
    name: str
    amount: Decimal


@dataclass
class ParticipantSummary:
    """Everything the individual balance page shows for one participant."""
    name: str
    bills_paid: int
    paid_total: Decimal
    bills_involved: int
    bills_total: int
    debts: list[DebtItem] = field(default_factory=list)

    @property
    def debt_sum(self) -> Decimal:
        return sum((d.amount for d in self.debts), Decimal("0"))


# =============================================================================
# Expense Detail
# =============================================================================

@dataclass
class DebtorItem:
    """Share of a bill owed by ``name`` (negative)."""
    name: str
    amount_owed: Decimal


@dataclass
class ExpenseDetail:
    """A single bill as shown on its detail page."""
    expense_id: int
    name: str
    debtee: str
    added_on: str
    total: Decimal
    deleted: bool = False
    debtors: list[DebtorItem] = field(default_factory=list)


# =============================================================================
# Bill Draft
# =============================================================================

@dataclass(frozen=True)
class NewBillParameters:
    """
    In-flight bill entry state.

    Threaded across requests as hidden form fields. ``total`` stays the raw
    text the user typed so it survives every hop unchanged.
    ``debtors is None`` means nobody has picked debtors yet, an empty set
    means "nobody is involved".
    """
    name: str | None = None
    total: str | None = None
    debtee: str | None = None
    debtors: frozenset[str] | None = None


@dataclass(frozen=True)
class NewBill:
    """A validated, submitted bill."""
    name: str
    total: Decimal
    debtee: str
    debtors: frozenset[str]

    def to_dict(self) -> dict[str, Any]:
        """Log serialisation."""
        return {
            "name": self.name,
            "total": str(self.total),
            "debtee": self.debtee,
            "debtors": sorted(self.debtors),
        }

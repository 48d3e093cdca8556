"""
Data Provider abstract interface.

The page views never reach for data themselves: route handlers ask the
provider on ``app.state.provider`` and pass plain schemas down.
``None`` means "unknown" and renders the not-found page.
"""

from abc import ABC, abstractmethod

from fastapi import Request

from src.domain.schemas import BalanceItem, ExpenseDetail, Nobt, ParticipantSummary


class NobtProvider(ABC):
    """
    Read-only access to nobts.

    No implementation persists anything; writes (new bill, delete) are
    handled by the routes without a store.
    """

    @abstractmethod
    def get_nobt(self, nobt_id: str) -> Nobt | None:
        """
        Ledger overview.

        Args:
            nobt_id: Opaque id from the URL

        Returns:
            Nobt or None if unknown
        """
        ...

    @abstractmethod
    def get_balances(self, nobt_id: str) -> list[BalanceItem] | None:
        """Balances of all participants."""
        ...

    @abstractmethod
    def get_participant(self, nobt_id: str, name: str) -> ParticipantSummary | None:
        """Summary and debts of one participant."""
        ...

    @abstractmethod
    def get_expense(self, nobt_id: str, expense_id: int) -> ExpenseDetail | None:
        """Single expense."""
        ...


def get_provider(request: Request) -> NobtProvider:
    """FastAPI dependency: provider configured at startup."""
    provider: NobtProvider = request.app.state.provider
    return provider

"""
Pytest fixtures shared by unit and e2e tests.
"""

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.app.providers import MockNobtProvider
from src.domain.schemas import NewBillParameters, Nobt

# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def provider() -> MockNobtProvider:
    """Provider serving the built-in sample ledger."""
    return MockNobtProvider()


@pytest.fixture
def sample_nobt(provider: MockNobtProvider) -> Nobt:
    """Sample ledger under the id ``abc``."""
    nobt = provider.get_nobt("abc")
    assert nobt is not None
    return nobt


@pytest.fixture
def empty_nobt() -> Nobt:
    """Ledger without participants or expenses."""
    return Nobt(nobt_id="empty", title="Empty", currency="EUR", total=Decimal("0"))


@pytest.fixture
def sample_draft() -> NewBillParameters:
    """Half-filled draft: name, total and debtee chosen, debtors not yet."""
    return NewBillParameters(name="Trip Snacks", total="12.50", debtee="Thomas")


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient on the real app (lifespan runs)."""
    from src.app.main import app

    with TestClient(app) as client:
        yield client

"""
test_read_routes.py - ledger, balance and expense routes

DoD:
1. Pages render from the provider
2. Provider returning None -> not-found page (200)
3. Delete -> 303 to the ledger
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.providers import MockNobtProvider, get_provider
from src.app.routes import balances, expenses, nobts

# =============================================================================
# Fixtures
# =============================================================================


class EmptyProvider(MockNobtProvider):
    """Answers None to everything."""

    def get_nobt(self, nobt_id):
        return None

    def get_balances(self, nobt_id):
        return None

    def get_participant(self, nobt_id, name):
        return None

    def get_expense(self, nobt_id, expense_id):
        return None


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.include_router(balances.router)
    app.include_router(expenses.router)
    app.include_router(nobts.router)
    app.state.provider = MockNobtProvider()
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def empty_client(app: FastAPI) -> TestClient:
    app.dependency_overrides[get_provider] = lambda: EmptyProvider()
    return TestClient(app)


NOT_FOUND_TEXT = "We looked everywhere but couldn't find this nobt."


# =============================================================================
# Tests
# =============================================================================


class TestLedger:
    """GET /{nobt_id}"""

    def test_overview(self, client: TestClient):
        response = client.get("/abc")

        assert response.status_code == 200
        assert "Swedish Shenanigans" in response.text
        assert 'href="/abc/14"' in response.text

    def test_unknown(self, empty_client: TestClient):
        response = empty_client.get("/abc")

        assert response.status_code == 200
        assert NOT_FOUND_TEXT in response.text


class TestBalances:
    """GET /{nobt_id}/balances[/{name}]"""

    def test_overview(self, client: TestClient):
        response = client.get("/abc/balances")

        assert response.status_code == 200
        assert "Balance overview" in response.text
        assert "EUR 390.34" in response.text

    def test_participant(self, client: TestClient):
        response = client.get("/abc/balances/Thomas")

        assert "Thomas paid 2 bills (EUR 1705.00)." in response.text
        assert "Thomas owes EUR 390.34 to 2 persons." in response.text

    def test_unknown_participant(self, client: TestClient):
        response = client.get("/abc/balances/Nelson")

        assert response.status_code == 200
        assert NOT_FOUND_TEXT in response.text

    def test_unknown_nobt(self, empty_client: TestClient):
        assert NOT_FOUND_TEXT in empty_client.get("/abc/balances").text


class TestExpenses:
    """GET /{nobt_id}/{expense_id}, POST .../delete"""

    def test_detail(self, client: TestClient):
        response = client.get("/abc/14")

        assert response.status_code == 200
        assert "Flughafen Essen" in response.text
        assert 'action="/abc/14/delete"' in response.text

    def test_deleted_detail(self, client: TestClient):
        response = client.get("/abc/13")

        assert "Benni Gutschein" in response.text
        assert "/abc/13/delete" not in response.text

    def test_unknown_expense(self, client: TestClient):
        response = client.get("/abc/999")

        assert response.status_code == 200
        assert NOT_FOUND_TEXT in response.text

    def test_delete(self, client: TestClient):
        response = client.post("/abc/14/delete", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/abc"

    def test_delete_any_id(self, client: TestClient):
        response = client.post("/abc/whatever/delete", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/abc"

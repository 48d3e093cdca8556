"""
test_pages.py - page views

DoD:
- ledger: deleted expenses struck through, balances link, FAB
- bill form: draft fields echoed, debtee / debtors summary text
- debtor picker: pre-check rules
- participant: pluralisation, debts subtitle
- expense: delete action hidden once deleted
- all user text escaped
"""

from decimal import Decimal

from src.app.views import (
    balances_page,
    debtee_page,
    debtors_page,
    expense_page,
    ledger_page,
    new_bill_page,
    not_found_page,
    participant_page,
)
from src.app.views.pages import debts_subtitle
from src.domain.schemas import (
    BalanceItem,
    DebtItem,
    DebtorItem,
    ExpenseDetail,
    ExpenseItem,
    NewBillParameters,
    Nobt,
    ParticipantSummary,
)


def _checkbox_checked(html: str, name: str) -> bool:
    """Whether the debtor checkbox for ``name`` carries ``checked``."""
    marker = f'id="{name}_involved_checkbox" type="checkbox" name="debtors" value="{name}"'
    start = html.index(marker)
    end = html.index(">", start)
    return "checked" in html[start + len(marker):end]


# =============================================================================
# Ledger
# =============================================================================


class TestLedgerPage:
    """ledger_page tests."""

    def test_header(self, sample_nobt: Nobt):
        html = ledger_page(sample_nobt)

        assert html.startswith("<!DOCTYPE html>")
        assert "Swedish Shenanigans" in html
        assert "EUR 1521.00" in html
        assert 'href="/abc/balances"' in html
        assert "Show balances" in html

    def test_expense_rows(self, sample_nobt: Nobt):
        html = ledger_page(sample_nobt)

        assert 'href="/abc/14"' in html
        assert "Thomas paid &#x27;Flughafen Essen&#x27;" in html
        assert "EUR 39.00" in html
        assert html.count("line-through opacity-30") == 1

    def test_fab(self, sample_nobt: Nobt):
        assert 'href="/abc/bill"' in ledger_page(sample_nobt)

    def test_title_escaped(self):
        nobt = Nobt(
            nobt_id="x",
            title="<script>alert(1)</script>",
            currency="EUR",
            total=Decimal("0"),
            expenses=[ExpenseItem(expense_id=1, description="<b>", amount=Decimal("1"))],
        )

        html = ledger_page(nobt)

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "&lt;b&gt;" in html


# =============================================================================
# Bill Workflow
# =============================================================================


class TestNewBillPage:
    """new_bill_page tests."""

    def test_empty_draft(self, sample_nobt: Nobt):
        html = new_bill_page(sample_nobt, NewBillParameters())

        assert 'action="/abc/bill/new"' in html
        assert 'formaction="/abc/bill/debtee"' in html
        assert 'formaction="/abc/bill/debtors"' in html
        assert "Select a Debtee" in html
        assert "4 persons are involved." in html
        assert "€" in html

    def test_draft_echoed(self, sample_nobt: Nobt, sample_draft: NewBillParameters):
        html = new_bill_page(sample_nobt, sample_draft)

        assert 'name="name" value="Trip Snacks"' in html
        assert 'name="total" value="12.50"' in html
        assert 'checked value="Thomas"' in html
        assert "Thomas paid the bill." in html

    def test_debtee_outside_bootstrap_counts(self, sample_nobt: Nobt):
        draft = NewBillParameters(debtee="Nelson")

        assert "5 persons are involved." in new_bill_page(sample_nobt, draft)

    def test_chosen_debtors(self, sample_nobt: Nobt):
        draft = NewBillParameters(debtors=frozenset({"Simon"}))
        html = new_bill_page(sample_nobt, draft)

        assert "1 person is involved" in html
        assert '<input type="hidden" name="debtors" value="">' in html
        assert '<input type="hidden" name="debtors" value="Simon">' in html
        assert 'value="Prada"' not in html

    def test_nobody_involved(self, sample_nobt: Nobt):
        html = new_bill_page(sample_nobt, NewBillParameters(debtors=frozenset()))

        assert "Nobody is involved" in html

    def test_unknown_currency_uses_code(self, empty_nobt: Nobt):
        empty_nobt.currency = "CHF"

        assert "CHF" in new_bill_page(empty_nobt, NewBillParameters())


class TestDebteePage:
    """debtee_page tests."""

    def test_one_form_per_candidate(self, sample_nobt: Nobt):
        html = debtee_page(sample_nobt, NewBillParameters(debtee="Nelson"))

        for name in ("Benji", "Nelson", "Prada", "Simon", "Thomas"):
            assert f'<input type="hidden" name="debtee" value="{name}">' in html
        assert "Who paid?" in html
        assert "Someone else?" in html

    def test_candidates_sorted(self, sample_nobt: Nobt):
        html = debtee_page(sample_nobt, NewBillParameters())

        positions = [html.index(f'name="debtee" value="{n}"') for n in ("Benji", "Prada", "Simon", "Thomas")]
        assert positions == sorted(positions)

    def test_draft_carried_without_debtee(self, sample_nobt: Nobt, sample_draft: NewBillParameters):
        html = debtee_page(sample_nobt, sample_draft)

        assert '<input type="hidden" name="name" value="Trip Snacks">' in html
        assert '<input type="hidden" name="total" value="12.50">' in html
        assert 'required type="text" name="debtee"' in html

    def test_current_debtee_marked(self, sample_nobt: Nobt, sample_draft: NewBillParameters):
        html = debtee_page(sample_nobt, sample_draft)

        assert html.count("bg-turquoise rounded-full w-2 h-2") == 1


class TestDebtorsPage:
    """debtors_page tests."""

    def test_all_checked_when_not_chosen(self, sample_nobt: Nobt):
        html = debtors_page(sample_nobt, NewBillParameters())

        for name in ("Benji", "Prada", "Simon", "Thomas"):
            assert _checkbox_checked(html, name)

    def test_all_checked_when_empty(self, sample_nobt: Nobt):
        html = debtors_page(sample_nobt, NewBillParameters(debtors=frozenset()))

        for name in ("Benji", "Prada", "Simon", "Thomas"):
            assert _checkbox_checked(html, name)

    def test_only_chosen_checked(self, sample_nobt: Nobt):
        draft = NewBillParameters(debtors=frozenset({"Simon", "Nelson"}))
        html = debtors_page(sample_nobt, draft)

        assert _checkbox_checked(html, "Simon")
        assert _checkbox_checked(html, "Nelson")
        assert not _checkbox_checked(html, "Thomas")
        assert not _checkbox_checked(html, "Benji")

    def test_forms(self, sample_nobt: Nobt, sample_draft: NewBillParameters):
        html = debtors_page(sample_nobt, sample_draft)

        assert 'action="/abc/bill"' in html
        assert 'action="/abc/bill/debtors"' in html
        assert "Set debtors" in html
        assert '<input type="hidden" name="debtee" value="Thomas">' in html
        assert 'required type="text" name="debtors"' in html


# =============================================================================
# Balances
# =============================================================================


class TestBalancesPage:
    """balances_page tests."""

    def test_rows(self, sample_nobt: Nobt):
        balances = [
            BalanceItem(name="Simon", amount=Decimal("-99.66")),
            BalanceItem(name="Benji", amount=Decimal("0")),
        ]

        html = balances_page(sample_nobt, balances)

        assert "Balance overview" in html
        assert "The balances of all users in this Nobt." in html
        assert 'href="/abc/balances/Simon"' in html
        assert "-EUR 99.66" in html
        assert "EUR 0.00" in html
        assert "text-red" in html

    def test_name_quoted_in_link(self, sample_nobt: Nobt):
        html = balances_page(sample_nobt, [BalanceItem(name="Bart Simpson", amount=Decimal("1"))])

        assert 'href="/abc/balances/Bart%20Simpson"' in html


class TestParticipantPage:
    """participant_page tests."""

    def _summary(self, **overrides) -> ParticipantSummary:
        values = dict(
            name="Thomas",
            bills_paid=2,
            paid_total=Decimal("1705"),
            bills_involved=13,
            bills_total=14,
            debts=[
                DebtItem(name="Prada", amount=Decimal("290.68")),
                DebtItem(name="Simon", amount=Decimal("99.66")),
            ],
        )
        values.update(overrides)
        return ParticipantSummary(**values)

    def test_summary_lines(self, sample_nobt: Nobt):
        html = participant_page(sample_nobt, self._summary())

        assert "Thomas paid 2 bills (EUR 1705.00)." in html
        assert "Thomas participates in 13 of 14 bills." in html
        assert 'href="/abc/balances"' in html

    def test_singular(self, sample_nobt: Nobt):
        html = participant_page(
            sample_nobt, self._summary(bills_paid=1, bills_involved=1, bills_total=1)
        )

        assert "Thomas paid 1 bill (EUR 1705.00)." in html
        assert "Thomas participates in 1 of 1 bill." in html

    def test_debts_subtitle(self):
        summary = self._summary()

        assert debts_subtitle("EUR", summary) == "Thomas owes EUR 390.34 to 2 persons."

    def test_debts_subtitle_single(self):
        summary = self._summary(debts=[DebtItem(name="Simon", amount=Decimal("5"))])

        assert debts_subtitle("EUR", summary) == "Thomas owes EUR 5.00 to 1 person."

    def test_no_debts(self, sample_nobt: Nobt):
        html = participant_page(sample_nobt, self._summary(debts=[]))

        assert "Thomas does not owe anything." in html


# =============================================================================
# Expense
# =============================================================================


class TestExpensePage:
    """expense_page tests."""

    def _expense(self, deleted: bool) -> ExpenseDetail:
        return ExpenseDetail(
            expense_id=14,
            name="Flughafen Essen",
            debtee="Thomas",
            added_on="28 August 2022",
            total=Decimal("39"),
            deleted=deleted,
            debtors=[DebtorItem(name="Simon", amount_owed=Decimal("-19.5"))],
        )

    def test_details(self, sample_nobt: Nobt):
        html = expense_page(sample_nobt, self._expense(deleted=False))

        assert "Flughafen Essen" in html
        assert "Thomas paid this bill." in html
        assert "Added on 28 August 2022." in html
        assert "The invoice total is EUR 39.00." in html
        assert "-EUR 19.50" in html

    def test_delete_action(self, sample_nobt: Nobt):
        html = expense_page(sample_nobt, self._expense(deleted=False))

        assert 'action="/abc/14/delete"' in html
        assert 'hx-confirm="Deleting a bill is permanent. Proceed?"' in html

    def test_deleted_has_no_actions(self, sample_nobt: Nobt):
        html = expense_page(sample_nobt, self._expense(deleted=True))

        assert "/abc/14/delete" not in html
        assert "Actions" not in html


class TestNotFoundPage:
    """not_found_page tests."""

    def test_content(self):
        html = not_found_page()

        assert "We looked everywhere but couldn&#x27;t find this nobt." not in html
        assert "We looked everywhere but couldn't find this nobt." in html
        assert 'href="/create"' in html

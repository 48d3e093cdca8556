"""
Page views.

One function per route. Each takes schemas (and the bill draft where the
page is part of the bill workflow) and returns a complete HTML document.
No I/O, no data access.
"""

from src.core.draft import (
    candidate_names,
    debtors_summary,
    effective_debtors,
    encode_debtors,
    encode_draft,
)
from src.core.formatting import format_amount
from src.domain.constants import (
    CURRENCY_SYMBOLS,
    DELETE_EXPENSE_CONFIRM,
    FIELD_DEBTEE,
    FIELD_DEBTORS,
    FIELD_NAME,
    FIELD_TOTAL,
    NAME_PLACEHOLDER,
)
from src.domain.schemas import (
    BalanceItem,
    ExpenseDetail,
    NewBillParameters,
    Nobt,
    ParticipantSummary,
)

from .components import (
    amount,
    app_shell,
    avatar,
    back_link,
    document,
    escape_html,
    fab,
    form_list_item,
    header,
    header_title,
    hidden_fields,
    icon,
    item_list,
    join,
    link_list_item,
    list_item,
    list_item_icon,
    nobt_url,
    section,
    site_title,
    themed_amount,
)

_ICON_SLOT = "w-10 h-10 flex items-center justify-center text-xl text-[grey] material-symbols-outlined"
_WHITE_BOX = "flex flex-col bg-white p-2 gap-2"
_ADD_BUTTON = "flex items-center hover:bg-hover gap-2 py-2 px-4 rounded-md shadow cursor-pointer"
_TEXT_INPUT = "outline-none border-b appearance-none w-full flex-grow p-2 truncate"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


# =============================================================================
# Ledger
# =============================================================================


def ledger_page(nobt: Nobt) -> str:
    """Ledger overview: title, total, participants and expense list."""
    expense_items = []
    for expense in nobt.expenses:
        classes = "grow flex flex-col"
        if expense.deleted:
            classes += " line-through opacity-30"

        expense_items.append(link_list_item(
            nobt_url(nobt.nobt_id, expense.expense_id),
            list_item_icon("receipt"),
            f"""<span class="{classes}">
                <span>{escape_html(expense.description)}</span>
                {amount(nobt.currency, expense.amount, "text-darkGrey")}
            </span>""",
        ))

    return app_shell(
        nobt.title,
        header(site_title()),
        f"""<div class="bg-turquoise text-white p-4 flex flex-col gap-4">
    <h2 class="text-center text-3xl">{escape_html(nobt.title)}</h2>
    <ul class="flex items-center justify-center space-x-4">
        <li class="inline-block">
            <div class="flex items-center gap-2 text-sm">
                {icon("credit_card")}
                {amount(nobt.currency, nobt.total)}
            </div>
        </li>
        <li class="inline-block">
            <div class="flex items-center gap-2 text-sm">
                {icon("group")}
                {nobt.num_participants}
            </div>
        </li>
    </ul>
    <div class="text-center">
        <a href="{escape_html(nobt_url(nobt.nobt_id, "balances"))}" class="uppercase inline-block bg-darkGreen px-3 py-2">Show balances</a>
    </div>
</div>""",
        f"""<div class="bg-white p-4">
    {item_list(*expense_items)}
</div>""",
        fab(nobt.nobt_id),
    )


# =============================================================================
# Bill Workflow
# =============================================================================


def new_bill_page(nobt: Nobt, draft: NewBillParameters) -> str:
    """
    Bill entry form.

    "Who paid?" and "Who is involved?" submit the whole form to the picker
    pages (without validation); "Add bill" submits it to ``/bill/new``.
    While no debtors have been chosen every candidate is involved.
    """
    nobt_id = nobt.nobt_id
    debtors = effective_debtors(nobt.participants, draft)
    symbol = CURRENCY_SYMBOLS.get(nobt.currency, nobt.currency)

    if draft.debtee is not None:
        debtee_radio = (
            '<input class="appearance-none" required type="radio" '
            f'name="{FIELD_DEBTEE}" checked value="{escape_html(draft.debtee)}">'
        )
        debtee_text = f'<span class="text-black text-left flex-grow">{escape_html(draft.debtee)} paid the bill.</span>'
    else:
        debtee_radio = f'<input class="appearance-none" required type="radio" name="{FIELD_DEBTEE}" value="">'
        debtee_text = '<span class="text-[grey] text-left flex-grow">Select a Debtee</span>'

    debtors_color = "text-[grey]" if not debtors else "text-black"

    return app_shell(
        nobt.title,
        header(back_link(nobt_url(nobt_id)), header_title("Add a bill")),
        f"""<form class="bg-turquoise p-4 flex flex-col gap-4" method="post" action="{escape_html(nobt_url(nobt_id, "bill", "new"))}">
    <section class="flex flex-col bg-white p-2">
        <h2 class="text-black font-bold text-sm">What did you buy?</h2>
        <input required class="outline-none peer border-b py-2" name="{FIELD_NAME}" value="{escape_html(draft.name or "")}" placeholder="Trip Snacks, Train Tickets, Beer, ...">
        <span class="text-xs text-[grey]">Enter a descriptive name for what was paid for.</span>
    </section>
    <section class="flex flex-col bg-white p-2">
        <h2 class="text-black font-bold text-sm">How much did it cost?</h2>
        <div class="flex items-center">
            <span class="w-10 h-10 text-[grey] flex items-center justify-center text-xl">{escape_html(symbol)}</span>
            <input required class="outline-none peer border-b py-2 appearance-none w-full" name="{FIELD_TOTAL}" value="{escape_html(draft.total or "")}" step="0.01" min="0" type="number" placeholder="0.00">
        </div>
        <span class="text-xs text-[grey]">Enter the total of this bill.</span>
    </section>
    <section class="{_WHITE_BOX}">
        <h2 class="text-black font-bold text-sm">Who paid?</h2>
        <button type="submit" formnovalidate formmethod="post" formaction="{escape_html(nobt_url(nobt_id, "bill", "debtee"))}" class="flex items-center hover:bg-hover cursor-pointer">
            <span class="{_ICON_SLOT}">person{debtee_radio}</span>
            {debtee_text}
            <span class="{_ICON_SLOT}">edit</span>
        </button>
        <span class="text-xs text-[grey]">Select the person who paid this bill.</span>
    </section>
    <section class="{_WHITE_BOX}">
        <h2 class="text-black font-bold text-sm">Who is involved?</h2>
        <button type="submit" formnovalidate formmethod="post" formaction="{escape_html(nobt_url(nobt_id, "bill", "debtors"))}" class="flex items-center hover:bg-hover cursor-pointer">
            <span class="{_ICON_SLOT}">group</span>
            {hidden_fields(encode_debtors(debtors))}
            <span class="{debtors_color} text-left flex-grow">{escape_html(debtors_summary(len(debtors)))}</span>
            <span class="{_ICON_SLOT}">edit</span>
        </button>
        <span class="text-xs text-[grey]">Select who is involved in this bill.</span>
    </section>
    <div>
        <button class="flex items-center justify-center gap-2 text-white uppercase rounded shadow px-4 py-2 bg-darkGreen" type="submit">
            {icon("check_circle")}
            Add bill
        </button>
    </div>
</form>""",
    )


def _choose_debtee_form(nobt_id: str, draft: NewBillParameters, candidate: str) -> str:
    """One-click form picking ``candidate`` as debtee."""
    selected_dot = ""
    if draft.debtee == candidate:
        selected_dot = '<span class="block bg-turquoise rounded-full w-2 h-2"></span>'

    return f"""<form method="post" action="{escape_html(nobt_url(nobt_id, "bill"))}" class="w-full">
    {hidden_fields([(FIELD_DEBTEE, candidate)])}
    {hidden_fields(encode_draft(draft, exclude=[FIELD_DEBTEE]))}
    <button class="flex items-center hover:bg-hover gap-2 p-2 cursor-pointer w-full">
        {avatar(candidate)}
        <span class="flex-grow text-left">{escape_html(candidate)}</span>
        <span class="flex items-center justify-center rounded-full border border-darkGrey w-3.5 h-3.5">{selected_dot}</span>
    </button>
</form>"""


def debtee_page(nobt: Nobt, draft: NewBillParameters) -> str:
    """Debtee picker: one form per candidate plus a free-text form."""
    nobt_id = nobt.nobt_id
    candidates = candidate_names(nobt.participants, draft)

    return app_shell(
        nobt.title,
        header(back_link(nobt_url(nobt_id, "bill")), header_title("Select debtee")),
        f"""<div class="bg-turquoise p-4 flex flex-col gap-4">
    <section class="{_WHITE_BOX}">
        <h2 class="text-black font-bold text-sm">Who paid?</h2>
        {join(_choose_debtee_form(nobt_id, draft, c) for c in candidates)}
    </section>
    <section class="{_WHITE_BOX}">
        <h2 class="text-black font-bold text-sm">Someone else?</h2>
        <form method="post" action="{escape_html(nobt_url(nobt_id, "bill"))}" class="w-full flex items-center gap-2">
            {hidden_fields(encode_draft(draft, exclude=[FIELD_DEBTEE]))}
            <input class="{_TEXT_INPUT}" required type="text" name="{FIELD_DEBTEE}" placeholder="{escape_html(NAME_PLACEHOLDER)}">
            <button class="{_ADD_BUTTON}">
                {icon("person_add")}
                Add
            </button>
        </form>
    </section>
</div>""",
    )


def _debtor_checkbox(candidate: str, checked: bool) -> str:
    checkbox_id = escape_html(f"{candidate}_involved_checkbox")
    checked_attr = " checked" if checked else ""

    return f"""<div class="flex items-center hover:bg-hover p-2 cursor-pointer">
    <label class="flex-grow flex items-center gap-2" for="{checkbox_id}">
        {avatar(candidate)}
        {escape_html(candidate)}
    </label>
    <input id="{checkbox_id}" type="checkbox" name="{FIELD_DEBTORS}" value="{escape_html(candidate)}"{checked_attr}>
</div>"""


def debtors_page(nobt: Nobt, draft: NewBillParameters) -> str:
    """
    Debtor picker.

    A candidate is pre-checked when it is in the current debtor set, or
    when that set is empty.
    """
    nobt_id = nobt.nobt_id
    candidates = candidate_names(nobt.participants, draft)
    debtors = effective_debtors(nobt.participants, draft)
    other_fields = hidden_fields(encode_draft(draft, exclude=[FIELD_DEBTORS]))

    checkboxes = join(
        _debtor_checkbox(c, checked=(c in debtors or not debtors))
        for c in candidates
    )

    return app_shell(
        nobt.title,
        header(back_link(nobt_url(nobt_id, "bill")), header_title("Select debtors")),
        f"""<div class="bg-turquoise p-4 flex flex-col gap-4">
    <section class="{_WHITE_BOX}">
        <h2 class="text-black font-bold text-sm">Who is in?</h2>
        <form method="post" action="{escape_html(nobt_url(nobt_id, "bill"))}">
            {other_fields}
            {hidden_fields(encode_debtors([]))}
            {checkboxes}
            <div class="flex flex-row-reverse">
                <button type="submit" class="flex items-center hover:bg-hover gap-2 py-2 px-4 rounded-md shadow w-full justify-center">
                    {icon("check_circle")}
                    Set debtors
                </button>
            </div>
        </form>
    </section>
    <section class="{_WHITE_BOX}">
        <h2 class="text-black font-bold text-sm">Someone else?</h2>
        <form method="post" action="{escape_html(nobt_url(nobt_id, "bill", "debtors"))}" class="w-full flex items-center gap-2">
            {other_fields}
            {hidden_fields(encode_debtors(debtors))}
            <input class="{_TEXT_INPUT}" required type="text" name="{FIELD_DEBTORS}" placeholder="{escape_html(NAME_PLACEHOLDER)}">
            <button class="{_ADD_BUTTON}">
                {icon("person_add")}
                Add
            </button>
        </form>
    </section>
</div>""",
    )


# =============================================================================
# Balances
# =============================================================================


def balances_page(nobt: Nobt, balances: list[BalanceItem]) -> str:
    """Balances of all participants, each linking to its detail page."""
    items = [
        link_list_item(
            nobt_url(nobt.nobt_id, "balances", balance.name),
            avatar(balance.name),
            f"""<span class="grow flex flex-col">
                <span>{escape_html(balance.name)}</span>
                {themed_amount(nobt.currency, balance.amount)}
            </span>""",
        )
        for balance in balances
    ]

    return app_shell(
        nobt.title,
        header(back_link(nobt_url(nobt.nobt_id)), header_title("Balances")),
        f"""<div class="bg-white p-4">
    {section("Balance overview", "The balances of all users in this Nobt.", item_list(*items))}
</div>""",
    )


def debts_subtitle(currency: str, summary: ParticipantSummary) -> str:
    if not summary.debts:
        return f"{summary.name} does not owe anything."

    owed = format_amount(currency, summary.debt_sum)
    return f"{summary.name} owes {owed} to {_plural(len(summary.debts), 'person')}."


def participant_page(nobt: Nobt, summary: ParticipantSummary) -> str:
    """Summary and debts of one participant."""
    name = summary.name
    paid = format_amount(nobt.currency, summary.paid_total)

    debts = [
        list_item(
            avatar(debt.name),
            f"""<span class="grow flex flex-col">
                <span>{escape_html(debt.name)}</span>
                {themed_amount(nobt.currency, debt.amount)}
            </span>""",
        )
        for debt in summary.debts
    ]

    paid_line = f"{name} paid {_plural(summary.bills_paid, 'bill')} ({paid})."
    involved_line = f"{name} participates in {summary.bills_involved} of {_plural(summary.bills_total, 'bill')}."
    summary_section = section(
        "Summary",
        "",
        item_list(
            list_item(list_item_icon("info"), escape_html(paid_line)),
            list_item(list_item_icon("info"), escape_html(involved_line)),
        ),
    )
    debts_section = section("Debts", debts_subtitle(nobt.currency, summary), item_list(*debts))

    return app_shell(
        nobt.title,
        header(back_link(nobt_url(nobt.nobt_id, "balances")), header_title(name)),
        f"""<div class="bg-white p-4 flex flex-col gap-4">
    {summary_section}
    {debts_section}
</div>""",
    )


# =============================================================================
# Expense
# =============================================================================


def expense_page(nobt: Nobt, expense: ExpenseDetail) -> str:
    """Single bill. The delete action is hidden once the bill is deleted."""
    debtors = [
        list_item(
            avatar(debtor.name),
            f'<span class="flex-grow">{escape_html(debtor.name)}</span>',
            themed_amount(nobt.currency, debtor.amount_owed),
        )
        for debtor in expense.debtors
    ]

    actions = ""
    if not expense.deleted:
        actions = section(
            "Actions",
            "",
            item_list(
                form_list_item(
                    nobt_url(nobt.nobt_id, expense.expense_id, "delete"),
                    DELETE_EXPENSE_CONFIRM,
                    list_item_icon("delete"),
                    "Delete this bill",
                ),
            ),
        )

    total = format_amount(nobt.currency, expense.total)
    debtee_section = section(
        "Debtee",
        "",
        item_list(
            list_item(avatar(expense.debtee), escape_html(f"{expense.debtee} paid this bill.")),
            list_item(list_item_icon("access_time"), escape_html(f"Added on {expense.added_on}.")),
            list_item(list_item_icon("credit_card"), escape_html(f"The invoice total is {total}.")),
        ),
    )
    debtors_section = section("Debtors", "", item_list(*debtors))

    return app_shell(
        nobt.title,
        header(back_link(nobt_url(nobt.nobt_id)), header_title(expense.name)),
        f"""<div class="bg-white p-4 flex flex-col gap-4">
    {debtee_section}
    {debtors_section}
    {actions}
</div>""",
    )


# =============================================================================
# Not Found
# =============================================================================


def not_found_page() -> str:
    """Themed fallback page (served with status 200)."""
    return document(
        "Not found",
        "bg-turquoise sm:bg-lightGrey h-screen",
        f"""<div class="sm:pt-10">
    <div class="bg-turquoise container mx-auto sm:shadow-lg sm:rounded-lg max-w-3xl">
        {header(site_title())}
        <div class="p-12 flex flex-col gap-4 items-center">
            <h2 class="text-lg w-72 text-center text-white">We looked everywhere but couldn't find this nobt.</h2>
            <a class="bg-white rounded-md px-4 py-2 shadow" href="/create">Create a new nobt</a>
        </div>
    </div>
</div>""",
    )

"""
Presentational components.

Small functions that take explicit inputs and return HTML fragments.
Every piece of text and every attribute value goes through ``escape_html``;
arguments named ``children`` are already-rendered HTML.
"""

import html as html_escape_module
from collections.abc import Iterable
from decimal import Decimal
from urllib.parse import quote

from src.core.formatting import format_amount, make_initials, pick_bg_color
from src.domain.constants import SITE_NAME

# =============================================================================
# Helpers
# =============================================================================


def escape_html(text: object) -> str:
    """HTML escape (quotes included, safe inside attribute values)."""
    return html_escape_module.escape(str(text), quote=True)


def nobt_url(nobt_id: str, *segments: object) -> str:
    """Path below a nobt, each segment percent-encoded."""
    parts = [nobt_id, *(str(s) for s in segments)]
    return "/" + "/".join(quote(p, safe="") for p in parts)


def join(children: Iterable[str]) -> str:
    """Concatenate rendered fragments."""
    return "\n".join(c for c in children if c)


def hidden_input(name: str, value: str) -> str:
    return f'<input type="hidden" name="{escape_html(name)}" value="{escape_html(value)}">'


def hidden_fields(pairs: Iterable[tuple[str, str]]) -> str:
    """One hidden input per ``(field, value)`` pair."""
    return join(hidden_input(name, value) for name, value in pairs)


# =============================================================================
# Document
# =============================================================================

# hx-boost ignores a submitter's formaction/formmethod; copy them onto the
# outgoing htmx request.
FORMACTION_SCRIPT = """
htmx.on('htmx:configRequest', function (event) {
    if (event.detail.elt?.nodeName !== 'FORM') {
        return;
    }

    const submitter = event.detail.triggeringEvent?.submitter;

    if (!submitter) {
        return;
    }

    let formAction = submitter?.attributes?.formaction?.value;
    let formMethod = submitter?.attributes?.formmethod?.value?.toLowerCase();

    if (formAction) {
        let oldUrl = new URL(event.detail.path);
        oldUrl.pathname = formAction;

        event.detail.path = oldUrl.toString();
    }

    if (formMethod) {
        event.detail.verb = formMethod;

        if (formMethod === 'post') {
            event.detail.headers['Content-Type'] = 'application/x-www-form-urlencoded';
        }
    }
});
"""


def head(title: str) -> str:
    """``<head>`` with fonts, stylesheet and htmx."""
    return f"""<head>
    <title>{escape_html(title)}</title>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta name="description" content="Nobt.io is a free service to split bills among your friends. It is super simple and ease to use. Create a nobt, share the link with your friends and start splitting bills.">
    <meta name="keywords" content="nobt,nobtio,bills,friends,ease,payments,settle up,split bills,money,trips,roadtrips,lunch,party">
    <link href="https://fonts.googleapis.com/css?family=Courgette|Comfortaa:700" rel="stylesheet">
    <link href="https://fonts.googleapis.com/css2?family=Material+Symbols+Outlined:opsz,wght,FILL,GRAD@48,500,1,0" rel="stylesheet">
    <link href="/style.css" rel="stylesheet">
    <script src="https://unpkg.com/htmx.org@1.9.1/dist/htmx.js" crossorigin="anonymous"></script>
    <script>{FORMACTION_SCRIPT}</script>
</head>"""


def document(title: str, body_class: str, children: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
{head(title)}
<body hx-boost="true" class="{escape_html(body_class)}">
{children}
</body>
</html>"""


def app_shell(title: str, *children: str) -> str:
    """Full page: card layout on a light grey background."""
    return document(
        title,
        "bg-lightGrey h-screen",
        f"""<div class="sm:pt-10">
    <div class="container mx-auto shadow-lg rounded-lg max-w-3xl">
        {join(children)}
    </div>
</div>""",
    )


# =============================================================================
# Header
# =============================================================================


def header(*children: str) -> str:
    return f"""<header class="bg-grey text-white px-4 h-16 grid grid-cols-12 items-center">
    {join(children)}
</header>"""


def site_title() -> str:
    return f'<h1 class="text-xl col-span-12">{escape_html(SITE_NAME)}</h1>'


def header_title(title: str) -> str:
    return (
        '<h1 class="text-lg col-span-10 col-start-2 uppercase font-bold text-center">'
        f"{escape_html(title)}</h1>"
    )


def back_link(href: str) -> str:
    """
    Back arrow.

    With JS it goes back in history, without JS it follows ``href``.
    """
    return (
        f'<a class="material-symbols-outlined" href="{escape_html(href)}" '
        'onclick="{ history.back(); return false; }">chevron_left</a>'
    )


# =============================================================================
# Layout
# =============================================================================


def section(title: str, subtitle: str, *children: str) -> str:
    """Titled block. An empty subtitle is not rendered."""
    subtitle_html = ""
    if subtitle:
        subtitle_html = f'<h3 class="text-darkGrey text-xs">{escape_html(subtitle)}</h3>'

    return f"""<section class="flex flex-col gap-4">
    <div class="flex flex-col gap-2">
        <h2 class="text-darkGrey text-2xl">{escape_html(title)}</h2>
        {subtitle_html}
    </div>
    {join(children)}
</section>"""


def item_list(*children: str) -> str:
    return f"""<ul class="flex flex-col">
{join(children)}
</ul>"""


def list_item(*children: str) -> str:
    return f"""<li class="block flex items-center gap-4 p-2">
    {join(children)}
</li>"""


def link_list_item(href: str, *children: str) -> str:
    return f"""<li>
    <a class="block flex items-center gap-4 cursor-pointer hover:bg-hover p-2" href="{escape_html(href)}">
        {join(children)}
        {icon("chevron_right")}
    </a>
</li>"""


def form_list_item(action: str, confirm: str, *children: str) -> str:
    """List entry that POSTs to ``action`` after a browser confirmation."""
    return f"""<li>
    <form action="{escape_html(action)}" method="post" hx-confirm="{escape_html(confirm)}">
        <button type="submit" class="block flex items-center gap-4 w-full cursor-pointer hover:bg-hover p-2">
            {join(children)}
        </button>
    </form>
</li>"""


# =============================================================================
# Icons, Avatars, Amounts
# =============================================================================


def icon(name: str) -> str:
    return f'<span class="material-symbols-outlined">{escape_html(name)}</span>'


def list_item_icon(name: str) -> str:
    return f'<span class="material-symbols-outlined text-darkGrey">{escape_html(name)}</span>'


def avatar(name: str) -> str:
    """Colored circle with the initials of ``name``."""
    classes = (
        f"flex items-center justify-center {pick_bg_color(name)} text-bold rounded-full "
        "h-6 w-6 text-xs text-white leading-normal uppercase"
    )
    return f'<div class="{escape_html(classes)}">{escape_html(make_initials(name))}</div>'


def amount(currency: str, value: Decimal, classes: str = "") -> str:
    css = f"text-sm {classes}".strip()
    return f'<span class="{escape_html(css)}">{escape_html(format_amount(currency, value))}</span>'


def themed_amount(currency: str, value: Decimal) -> str:
    """Amount colored by sign: red below zero, green above, grey at zero."""
    if value == 0:
        return amount(currency, value, "text-darkGrey")
    if value < 0:
        return amount(currency, value, "text-red")
    return amount(currency, value, "text-green")


# =============================================================================
# Floating Action Button
# =============================================================================

_FAB_OFFSETS = (
    "translate-y-16",
    "translate-y-32",
    "translate-y-48",
    "translate-y-64",
    "translate-y-80",
    "translate-y-96",
)


def fab_icon(name: str, styles: str) -> str:
    classes = (
        f"{styles} h-14 w-14 rounded-full flex items-center justify-center "
        "material-symbols-outlined shadow-[0_0_8px_rgba(0,0,0,0.28)]"
    )
    return f'<span class="{escape_html(classes)}">{escape_html(name)}</span>'


def fab_link(icon_name: str, text: str, href: str, index: int, disabled: bool) -> str:
    """
    One entry of the expanded FAB.

    Disabled entries render as a plain span.

    Raises:
        ValueError: index outside the supported stack height
    """
    if not 0 <= index < len(_FAB_OFFSETS):
        raise ValueError(f"FAB index out of range: {index}")

    cursor = " cursor-not-allowed" if disabled else ""
    link_styles = (
        f"relative z-10 block flex flex-row-reverse items-center gap-4 {_FAB_OFFSETS[index]} "
        "collapse opacity-0 peer-checked:visible peer-checked:translate-y-0 "
        f"peer-checked:opacity-100 duration-300 transition-all{cursor}"
    )
    text_styles = "bg-black12 text-black26" if disabled else "bg-turquoise text-white"
    inner = (
        f"{fab_icon(icon_name, text_styles)}"
        f'<span class="{text_styles} px-2 py-1 rounded">{escape_html(text)}</span>'
    )

    if disabled:
        return f'<span class="{link_styles}">{inner}</span>'
    return f'<a href="{escape_html(href)}" class="{link_styles}">{inner}</a>'


def fab(nobt_id: str) -> str:
    """Floating "+" button expanding to "Add a bill" and "Pay someone"."""
    return f"""<div class="fixed bottom-6 right-6 transform-gpu space-y-4 text-right">
    <input id="fab-toggle" type="checkbox" class="hidden peer">
    {fab_link("credit_card", "Pay someone", nobt_url(nobt_id, "payment"), 1, disabled=True)}
    {fab_link("receipt", "Add a bill", nobt_url(nobt_id, "bill"), 0, disabled=False)}
    <label for="fab-toggle" class="relative z-20 inline-block peer-checked:rotate-[225deg] duration-300 transition-transform cursor-pointer">
        {fab_icon("add", "bg-turquoise text-white")}
    </label>
</div>"""

"""
Domain Constants: application-wide values.

Avatar palette, bootstrap defaults, server defaults and the copy that is
shared between several pages.
"""

# =============================================================================
# Server
# =============================================================================

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"

# =============================================================================
# Avatar Palette
# =============================================================================
# Order matters: the avatar color is picked by index (hash % len).

AVATAR_COLORS: tuple[str, ...] = (
    "bg-[#929093]",
    "bg-[#EBDD94]",
    "bg-[#DA8D93]",
    "bg-[#BA99B8]",
    "bg-[#D7B8A3]",
    "bg-[#CD9775]",
    "bg-[#DB8F5B]",
    "bg-[#9E5C5D]",
    "bg-[#CCD0D1]",
    "bg-[#A7CCDE]",
    "bg-[#87A9C5]",
    "bg-[#255993]",
    "bg-[#89BFAF]",
    "bg-[#2EA1B4]",
    "bg-[#8A8A4C]",
    "bg-[#587942]",
)

# =============================================================================
# Bill Draft Form Fields
# =============================================================================

FIELD_NAME = "name"
FIELD_TOTAL = "total"
FIELD_DEBTEE = "debtee"
FIELD_DEBTORS = "debtors"

# =============================================================================
# Copy
# =============================================================================

SITE_NAME = "nobt.io"
DELETE_EXPENSE_CONFIRM = "Deleting a bill is permanent. Proceed?"
NAME_PLACEHOLDER = "Bart, Milhouse, Nelson, ..."

CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "\u20ac",
    "USD": "$",
    "GBP": "\u00a3",
}

# =============================================================================
# Landing Page Team
# =============================================================================

TEAM_MEMBERS: tuple[dict[str, str], ...] = (
    {
        "name": "Thomas",
        "image": "/thomas.png",
        "offset": "0px -600px",
        "github": "thomaseizinger",
        "linked_in": "thomas-eizinger-b45a37144",
        "homepage": "https://eizinger.io",
    },
    {
        "name": "David",
        "image": "/david.png",
        "offset": "0px -1000px",
        "github": "duffleit",
        "linked_in": "David_Leitner4",
        "homepage": "https://leitner.io",
    },
    {
        "name": "Matthias",
        "image": "/matthias.png",
        "offset": "0px -800px",
        "github": "KreMat",
        "linked_in": "Matthias_Kreuzriegler",
        "homepage": "https://kreuzriegler.at",
    },
)

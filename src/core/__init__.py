"""
Core layer: pure helpers shared by the views and routes.

- formatting: amounts, initials, avatar colors
- draft: bill draft codec and terminal validation
- logging: root logger setup
"""

from .draft import (
    candidate_names,
    debtors_summary,
    decode_draft,
    effective_debtors,
    encode_draft,
    parse_new_bill,
)
from .formatting import format_amount, make_initials, pick_bg_color
from .logging import setup_logging

__all__ = [
    # formatting
    "format_amount",
    "make_initials",
    "pick_bg_color",
    # draft
    "decode_draft",
    "encode_draft",
    "candidate_names",
    "effective_debtors",
    "debtors_summary",
    "parse_new_bill",
    # logging
    "setup_logging",
]

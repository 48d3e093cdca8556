"""
Bill draft codec.

The bill entry workflow keeps no server-side session: the draft lives in
hidden form fields and is echoed back by the browser on every step.

    bill form --(who paid?)--> debtee picker --(pick)--> bill form
    bill form --(who is involved?)--> debtor picker --(set)--> bill form
    bill form --(add bill)--> /bill/new

A blank ``debtors`` marker is written whenever the debtor set has been
chosen, so that an empty selection survives a round-trip instead of being
read back as "not chosen yet".
"""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import Protocol

from src.domain.constants import FIELD_DEBTEE, FIELD_DEBTORS, FIELD_NAME, FIELD_TOTAL
from src.domain.errors import ErrorCodes, NobtError
from src.domain.schemas import NewBill, NewBillParameters


class MultiValueForm(Protocol):
    """Starlette ``FormData`` / ``QueryParams`` shape."""

    def get(self, key: str, default: object = None) -> object: ...

    def getlist(self, key: str) -> list: ...

    def __contains__(self, key: object) -> bool: ...


# =============================================================================
# Decode / Encode
# =============================================================================


def _optional_text(value: object) -> str | None:
    if not isinstance(value, str) or value == "":
        return None
    return value


def _participant(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    name = value.strip()
    return name or None


def decode_draft(form: MultiValueForm) -> NewBillParameters:
    """
    Read a draft from submitted form fields or query parameters.

    ``name`` and ``total`` are kept exactly as typed (blank -> None).
    Participant names are stripped, blanks dropped.
    """
    debtors: frozenset[str] | None = None
    if FIELD_DEBTORS in form:
        debtors = frozenset(
            name
            for name in (_participant(v) for v in form.getlist(FIELD_DEBTORS))
            if name is not None
        )

    return NewBillParameters(
        name=_optional_text(form.get(FIELD_NAME)),
        total=_optional_text(form.get(FIELD_TOTAL)),
        debtee=_participant(form.get(FIELD_DEBTEE)),
        debtors=debtors,
    )


def encode_draft(
    draft: NewBillParameters,
    exclude: Iterable[str] = (),
) -> list[tuple[str, str]]:
    """
    Serialise a draft into ``(field, value)`` pairs for hidden inputs.

    Args:
        draft: Current draft
        exclude: Field names the page renders as visible inputs instead

    Returns:
        Pairs in a stable order (debtor names sorted)
    """
    skip = set(exclude)
    pairs: list[tuple[str, str]] = []

    if FIELD_NAME not in skip and draft.name is not None:
        pairs.append((FIELD_NAME, draft.name))
    if FIELD_TOTAL not in skip and draft.total is not None:
        pairs.append((FIELD_TOTAL, draft.total))
    if FIELD_DEBTEE not in skip and draft.debtee is not None:
        pairs.append((FIELD_DEBTEE, draft.debtee))
    if FIELD_DEBTORS not in skip and draft.debtors is not None:
        pairs.extend(encode_debtors(draft.debtors))

    return pairs


def encode_debtors(debtors: Iterable[str]) -> list[tuple[str, str]]:
    """Marker plus one pair per debtor."""
    return [(FIELD_DEBTORS, "")] + [(FIELD_DEBTORS, d) for d in sorted(debtors)]


# =============================================================================
# Participants
# =============================================================================


def candidate_names(bootstrap: Iterable[str], draft: NewBillParameters) -> list[str]:
    """Selectable participants: bootstrap names, debtee and chosen debtors."""
    names = set(bootstrap)
    if draft.debtee is not None:
        names.add(draft.debtee)
    if draft.debtors is not None:
        names.update(draft.debtors)
    return sorted(names)


def effective_debtors(bootstrap: Iterable[str], draft: NewBillParameters) -> frozenset[str]:
    """Chosen debtors, or every candidate while nothing has been chosen."""
    if draft.debtors is not None:
        return draft.debtors
    return frozenset(candidate_names(bootstrap, draft))


def debtors_summary(count: int) -> str:
    """Pluralised sentence for the "Who is involved?" button."""
    if count == 0:
        return "Nobody is involved"
    if count == 1:
        return "1 person is involved"
    return f"{count} persons are involved."


# =============================================================================
# Terminal Submission
# =============================================================================


def parse_total(raw: str) -> Decimal:
    """
    Parse the bill total.

    Raises:
        NobtError: INVALID_TOTAL for non-numeric, NaN/Inf or negative input
    """
    try:
        total = Decimal(raw.strip())
    except InvalidOperation as e:
        raise NobtError(ErrorCodes.INVALID_TOTAL, value=raw) from e

    if not total.is_finite() or total < 0:
        raise NobtError(ErrorCodes.INVALID_TOTAL, value=raw)
    return total


def parse_new_bill(
    name: str,
    total: str,
    debtee: str,
    debtors: Iterable[str],
) -> NewBill:
    """
    Validate a final bill submission.

    Raises:
        NobtError: MISSING_REQUIRED_FIELD or INVALID_TOTAL
    """
    if not name.strip():
        raise NobtError(ErrorCodes.MISSING_REQUIRED_FIELD, field=FIELD_NAME)
    if not total.strip():
        raise NobtError(ErrorCodes.MISSING_REQUIRED_FIELD, field=FIELD_TOTAL)

    payer = _participant(debtee)
    if payer is None:
        raise NobtError(ErrorCodes.MISSING_REQUIRED_FIELD, field=FIELD_DEBTEE)

    involved = frozenset(
        d for d in (_participant(v) for v in debtors) if d is not None
    )

    return NewBill(
        name=name,
        total=parse_total(total),
        debtee=payer,
        debtors=involved,
    )

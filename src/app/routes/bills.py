"""
Bill Routes: multi-step bill entry.

No server-side session: every step reads the draft from the submitted
form (POST) or the query string (GET) and writes it back into hidden fields.

- GET/POST /{nobt_id}/bill -> bill form
- GET/POST /{nobt_id}/bill/debtee -> debtee picker
- GET/POST /{nobt_id}/bill/debtors -> debtor picker
- POST /{nobt_id}/bill/new -> final submission
"""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from src.app.providers import NobtProvider, get_provider
from src.app.responses import not_found_response
from src.app.views import debtee_page, debtors_page, new_bill_page
from src.app.views.components import nobt_url
from src.core.draft import decode_draft, parse_new_bill
from src.domain.errors import NobtError
from src.domain.schemas import NewBillParameters

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_draft(request: Request) -> NewBillParameters:
    """Draft from the form body (POST) or the query string (GET)."""
    if request.method == "POST":
        form = await request.form()
        return decode_draft(form)
    return decode_draft(request.query_params)


# =============================================================================
# Draft Steps
# =============================================================================


@router.api_route("/{nobt_id}/bill", methods=["GET", "POST"], response_class=HTMLResponse)
async def new_bill(
    request: Request,
    nobt_id: str,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    """Bill form, pre-filled from the draft."""
    nobt = provider.get_nobt(nobt_id)
    if nobt is None:
        return not_found_response()

    draft = await read_draft(request)
    return HTMLResponse(content=new_bill_page(nobt, draft))


@router.api_route("/{nobt_id}/bill/debtee", methods=["GET", "POST"], response_class=HTMLResponse)
async def choose_bill_debtee(
    request: Request,
    nobt_id: str,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    nobt = provider.get_nobt(nobt_id)
    if nobt is None:
        return not_found_response()

    draft = await read_draft(request)
    return HTMLResponse(content=debtee_page(nobt, draft))


@router.api_route("/{nobt_id}/bill/debtors", methods=["GET", "POST"], response_class=HTMLResponse)
async def choose_bill_debtors(
    request: Request,
    nobt_id: str,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    nobt = provider.get_nobt(nobt_id)
    if nobt is None:
        return not_found_response()

    draft = await read_draft(request)
    return HTMLResponse(content=debtors_page(nobt, draft))


# =============================================================================
# Final Submission
# =============================================================================


@router.post("/{nobt_id}/bill/new")
async def add_new_bill(
    nobt_id: str,
    name: str = Form(...),
    total: str = Form(...),
    debtee: str = Form(...),
    debtors: list[str] = Form(default=[]),
) -> RedirectResponse:
    """
    Accept a finished bill.

    There is no store: the bill is validated, logged and dropped, then the
    browser is sent back to the ledger.
    """
    try:
        bill = parse_new_bill(name, total, debtee, debtors)
    except NobtError as e:
        logger.warning(f"Rejected bill for nobt {nobt_id!r}: {e}")
        raise HTTPException(status_code=422, detail=e.to_dict()) from e

    logger.info(
        f"New bill for nobt {nobt_id!r}: {bill.name!r} ({bill.total}) "
        f"paid by {bill.debtee!r}, {len(bill.debtors)} debtor(s)"
    )
    return RedirectResponse(url=nobt_url(nobt_id), status_code=303)

"""
Expense Routes.

- GET /{nobt_id}/{expense_id} -> expense detail (integer ids only)
- POST /{nobt_id}/{expense_id}/delete -> 303 back to the ledger
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from src.app.providers import NobtProvider, get_provider
from src.app.responses import not_found_response
from src.app.views import expense_page
from src.app.views.components import nobt_url

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{nobt_id}/{expense_id}/delete")
async def delete_expense(nobt_id: str, expense_id: str) -> RedirectResponse:
    """
    Delete an expense.

    Nothing is stored, so this only redirects. 303 See Other makes the
    browser follow up with a GET on the ledger.
    """
    logger.info(f"Delete requested for expense {expense_id!r} of nobt {nobt_id!r}")
    return RedirectResponse(url=nobt_url(nobt_id), status_code=303)


@router.get("/{nobt_id}/{expense_id:int}", response_class=HTMLResponse)
async def expense(
    nobt_id: str,
    expense_id: int,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    nobt = provider.get_nobt(nobt_id)
    detail = provider.get_expense(nobt_id, expense_id)
    if nobt is None or detail is None:
        return not_found_response()
    return HTMLResponse(content=expense_page(nobt, detail))

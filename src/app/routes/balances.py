"""
Balance Routes.

- GET /{nobt_id}/balances -> all participants
- GET /{nobt_id}/balances/{name} -> one participant's debts
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from src.app.providers import NobtProvider, get_provider
from src.app.responses import not_found_response
from src.app.views import balances_page, participant_page

router = APIRouter()


@router.get("/{nobt_id}/balances", response_class=HTMLResponse)
async def balances(
    nobt_id: str,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    nobt = provider.get_nobt(nobt_id)
    items = provider.get_balances(nobt_id)
    if nobt is None or items is None:
        return not_found_response()
    return HTMLResponse(content=balances_page(nobt, items))


@router.get("/{nobt_id}/balances/{name}", response_class=HTMLResponse)
async def individual_balance(
    nobt_id: str,
    name: str,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    nobt = provider.get_nobt(nobt_id)
    summary = provider.get_participant(nobt_id, name)
    if nobt is None or summary is None:
        return not_found_response()
    return HTMLResponse(content=participant_page(nobt, summary))

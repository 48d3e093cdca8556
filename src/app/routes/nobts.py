"""
Nobt Routes: ledger overview.

- GET /{nobt_id}
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from src.app.providers import NobtProvider, get_provider
from src.app.responses import not_found_response
from src.app.views import ledger_page

router = APIRouter()


@router.get("/{nobt_id}", response_class=HTMLResponse)
async def nobt_overview(
    nobt_id: str,
    provider: NobtProvider = Depends(get_provider),
) -> HTMLResponse:
    """Ledger overview with expenses and the add-bill button."""
    nobt = provider.get_nobt(nobt_id)
    if nobt is None:
        return not_found_response()
    return HTMLResponse(content=ledger_page(nobt))

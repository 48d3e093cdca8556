"""
Landing Page Route.

GET / -> marketing page rendered from the Jinja2 template ``landing.html``.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.domain.constants import TEAM_MEMBERS

_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def landing_page(request: Request) -> HTMLResponse:
    """Landing page with the team section."""
    return jinja_templates.TemplateResponse(
        request,
        "landing.html",
        {
            "title": "nobt.io: Split your bills with ease",
            "team": TEAM_MEMBERS,
        },
    )

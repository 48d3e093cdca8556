"""
Static Asset Routes.

Assets are read once at import time and served from memory:
- GET /style.css
- GET /team.js
- GET /not_found.jpg
- GET /{name}.png
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import Response

from src.app.responses import (
    CSSResponse,
    JavaScriptResponse,
    JPEGResponse,
    PNGResponse,
    not_found_response,
)

STATIC_DIR = Path(__file__).parent.parent / "static"

STYLES = (STATIC_DIR / "style.css").read_bytes()
TEAM_SCRIPT = (STATIC_DIR / "team.js").read_bytes()
NOT_FOUND_IMAGE = (STATIC_DIR / "not_found.jpg").read_bytes()
PNG_IMAGES: dict[str, bytes] = {
    path.stem: path.read_bytes() for path in sorted((STATIC_DIR / "images").glob("*.png"))
}

router = APIRouter()


@router.get("/style.css")
async def stylesheet() -> CSSResponse:
    return CSSResponse(content=STYLES)


@router.get("/team.js")
async def team_script() -> JavaScriptResponse:
    return JavaScriptResponse(content=TEAM_SCRIPT)


@router.get("/not_found.jpg")
async def not_found_image() -> JPEGResponse:
    return JPEGResponse(content=NOT_FOUND_IMAGE)


@router.get("/{image_name}.png")
async def png_image(image_name: str) -> Response:
    """Team pictures; unknown names get the not-found page."""
    image = PNG_IMAGES.get(image_name)
    if image is None:
        return not_found_response()
    return PNGResponse(content=image)

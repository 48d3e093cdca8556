"""
Response types for static assets and the not-found fallback.
"""

from fastapi.responses import HTMLResponse, Response

from src.app.views import not_found_page


class CSSResponse(Response):
    media_type = "text/css"


class JavaScriptResponse(Response):
    media_type = "application/javascript"


class JPEGResponse(Response):
    media_type = "image/jpeg"


class PNGResponse(Response):
    media_type = "image/png"


def not_found_response() -> HTMLResponse:
    """
    Themed not-found page, served with status 200.
    """
    return HTMLResponse(content=not_found_page(), status_code=200)

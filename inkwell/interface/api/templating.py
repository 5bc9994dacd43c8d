"""Jinja2 page rendering."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render a template from the templates directory.

    Args:
        request: Current request (templates use it for url_for)
        name: Template file name, e.g. ``"dashboard.html"``
        context: Template variables
        status_code: HTTP status of the response

    Returns:
        HTML response
    """
    return templates.TemplateResponse(
        request, name, context or {}, status_code=status_code
    )

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..cache import ViewCache
from ..dependencies import get_service, get_view_cache
from ..errors import PersistenceError
from ..services import LISTING_PATH, TodoService

logger = logging.getLogger(__name__)

_templates_dir = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(_templates_dir))

router = APIRouter(tags=["pages"])


def _render_home(
    request: Request,
    service: TodoService,
    cache: ViewCache,
    error: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    if error is None:
        todos = cache.get_or_compute(LISTING_PATH, service.list_todos)
    else:
        # The write already failed; a failing read must not replace its message
        try:
            todos = cache.get_or_compute(LISTING_PATH, service.list_todos)
        except PersistenceError:
            logger.warning("Listing unavailable while reporting: %s", error)
            todos = []
    return templates.TemplateResponse(
        request,
        "index.html",
        {"todos": todos, "error": error},
        status_code=status_code,
    )


# PUBLIC_INTERFACE
@router.get("/", response_class=HTMLResponse, summary="Todo Page")
def home(
    request: Request,
    service: TodoService = Depends(get_service),
    cache: ViewCache = Depends(get_view_cache),
) -> HTMLResponse:
    """
    Render the add form and the todo listing.
    """
    return _render_home(request, service, cache)


# PUBLIC_INTERFACE
@router.post("/todos", response_class=HTMLResponse, summary="Submit Todo Form")
def submit_todo(
    request: Request,
    title: Optional[str] = Form(None),
    service: TodoService = Depends(get_service),
    cache: ViewCache = Depends(get_view_cache),
):
    """
    Handle the add form. Redirects back to the listing unless the store
    failed, in which case the page is re-rendered with the error.
    """
    result = service.submit_new_todo(title)
    if result.error:
        return _render_home(
            request,
            service,
            cache,
            error=result.error,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return RedirectResponse(url=LISTING_PATH, status_code=status.HTTP_303_SEE_OTHER)

"""Server-rendered pages: home form, link listing and the add-url result."""

import logging
import os
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.dependencies import get_service
from src.services import IdSpaceExhausted, InvalidLink, ShortenerService

logger = logging.getLogger(__name__)
router = APIRouter()

templates = Jinja2Templates(
    directory=os.path.join(os.path.dirname(__file__), "templates")
)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(
    request: Request,
    service: Annotated[ShortenerService, Depends(get_service)],
):
    return templates.TemplateResponse(
        request, "index.html", {"num_urls_known": service.count_known()}
    )


@router.get("/urls", response_class=HTMLResponse, include_in_schema=False)
async def list_urls_page(
    request: Request,
    service: Annotated[ShortenerService, Depends(get_service)],
):
    return templates.TemplateResponse(
        request, "list_urls.html", {"urls": service.list_all()}
    )


@router.post("/add-url", response_class=HTMLResponse, include_in_schema=False)
async def add_url(
    request: Request,
    service: Annotated[ShortenerService, Depends(get_service)],
    longUrl: Annotated[str, Form()] = "",
):
    try:
        link = service.shorten(longUrl)
    except InvalidLink:
        return templates.TemplateResponse(
            request, "invalid_link.html", {}, status_code=status.HTTP_400_BAD_REQUEST
        )
    except IdSpaceExhausted as exc:
        return templates.TemplateResponse(
            request,
            "error.html",
            {"detail": exc.message},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return templates.TemplateResponse(
        request,
        "added_url.html",
        {"short_id": link.id, "short_path": f"/url/{link.id}"},
    )

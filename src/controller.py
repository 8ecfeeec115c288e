import logging
from typing import Annotated, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from src.dependencies import get_service
from src.models import ErrorResponse, ShortLink, Summary
from src.services import (
    IdSpaceExhausted,
    InvalidLink,
    RecordNotFound,
    ShortenerService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


# Routes
@router.get("/health")
def health_check():
    health_status = {"status": "healthy"}
    logger.info("Health Check: OK")
    return JSONResponse(content=health_status, status_code=status.HTTP_200_OK)


@router.get("/url/{short_id}", responses={404: {"model": ErrorResponse}})
async def redirect(
    service: Annotated[ShortenerService, Depends(get_service)],
    short_id: str,
):
    try:
        target_url = service.resolve(short_id)
        return RedirectResponse(url=target_url, status_code=status.HTTP_302_FOUND)

    except RecordNotFound as exc:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Content not found", "detail": str(exc)},
        )

    except Exception as exc:
        logger.error(f"Error redirecting URL: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )


@router.post(
    "/shorten",
    response_model=ShortLink,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def shorten(
    service: Annotated[ShortenerService, Depends(get_service)],
    url: str = Body(..., embed=True),
):
    try:
        return service.shorten(url)

    except InvalidLink as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid link", "detail": str(exc)},
        )

    except IdSpaceExhausted as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error", "detail": str(exc)},
        )

    except Exception as exc:
        logger.error(f"Error shortening URL: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )


@router.get("/api/urls", response_model=List[ShortLink])
async def list_urls(service: Annotated[ShortenerService, Depends(get_service)]):
    return service.list_all()


@router.get("/api/summary", response_model=Summary)
async def summary(service: Annotated[ShortenerService, Depends(get_service)]):
    return Summary(num_urls_known=service.count_known())

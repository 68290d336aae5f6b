from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from typing import List
import logging

from app.api.deps import get_settings, get_url_service
from app.core.config import Settings
from app.core.exceptions import CustomCodeExists, InvalidCustomCode, InvalidUrl
from app.schemas import ErrorResponse, ShortenRequest, ShortenResponse, StatsResponse
from app.services.shortener import URLService

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_JSON = "Invalid JSON"
SHORT_CODE_NOT_FOUND = "Short code not found"
NOT_FOUND = "Not found"


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Read the request body, refusing it once it grows past ``limit`` bytes."""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            logger.warning(f"Rejected request body larger than {limit} bytes")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_JSON)
    return bytes(body)


@router.get("/", response_class=PlainTextResponse, tags=["health"])
def health_check():
    return "URL Shortener API"


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def shorten_url_endpoint(
    request: Request,
    service: URLService = Depends(get_url_service),
    app_settings: Settings = Depends(get_settings),
):
    body = await read_limited_body(request, app_settings.MAX_BODY_BYTES)
    try:
        url_request = ShortenRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Rejected /shorten body with {e.error_count()} error(s)")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_JSON)

    try:
        result = service.shorten(url_request.url, url_request.custom_code)
    except (InvalidUrl, InvalidCustomCode) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except CustomCodeExists as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

    logger.info(f"API success: Shortened {url_request.url[:50]} to {result.short_code}")
    return ShortenResponse(short_url=result.short_url, short_code=result.short_code)


@router.get("/list", response_model=List[StatsResponse], tags=["stats"])
def list_urls_endpoint(service: URLService = Depends(get_url_service)):
    return [StatsResponse.model_validate(s) for s in service.list_all()]


@router.get(
    "/stats/{short_code:path}",
    response_model=StatsResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["stats"],
)
def get_url_statistics_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    stats = service.stats(short_code)
    if stats is None:
        logger.warning(f"Stats 404: Short code not found: {short_code}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SHORT_CODE_NOT_FOUND)
    return StatsResponse.model_validate(stats)


@router.get("/{short_code:path}", responses={404: {"model": ErrorResponse}}, tags=["redirect"])
def redirect_to_url_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    entry = service.lookup(short_code)
    if entry is None:
        logger.warning(f"Redirect 404: Short code not found: {short_code}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SHORT_CODE_NOT_FOUND)

    service.record_click(short_code)
    return RedirectResponse(url=entry.original_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)


@router.api_route(
    "/{path:path}",
    methods=["POST", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
def not_found_endpoint(path: str):
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

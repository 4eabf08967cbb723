"""API routes implementation."""

import logging
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from .schemas import ShortenRequest, ShortenResponse, ErrorResponse
from shorturl.service import INVALID_URL, WRONG_FORMAT

NOT_FOUND = "No short URL found for the given input"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
JSON_CONTENT_TYPE = "application/json"

router = APIRouter()
logger = logging.getLogger("shorturl.api")


async def read_submitted_url(request: Request) -> Optional[str]:
    """Pull the ``url`` field out of a JSON or form body.

    Returns None when the body carries no such field or has another content type.

    Raises:
        ValueError: If the body cannot be decoded or ``url`` is not a string
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        data = dict(form)
    elif content_type.startswith(JSON_CONTENT_TYPE):
        if not await request.body():
            return None
        data = await request.json()
    else:
        return None

    if not isinstance(data, dict):
        raise ValueError("Request body must be an object")

    return ShortenRequest.model_validate(data).url


@router.post(
    "/shorturl",
    response_model=ShortenResponse,
    responses={
        200: {"model": ShortenResponse, "description": "Short URL, or {'error': 'invalid url'}"},
    },
    summary="Create short URL",
    description="Validate a URL and return its numeric short code. Known URLs keep their code.",
)
async def create_short_url(request: Request):
    """Create a short URL."""
    service = request.app.state.service

    try:
        url = await read_submitted_url(request)
        entry = await service.create_short_url(url)
    except ValueError as e:
        logger.debug(f"Rejected submission: {e}")
        return JSONResponse(content={"error": INVALID_URL})
    except Exception as e:
        logger.error(f"Failed to create short URL: {e}")
        return JSONResponse(content={"error": INVALID_URL})

    return ShortenResponse(**entry.to_dict())


@router.api_route(
    "/shorturl/{short_url}",
    methods=["GET", "HEAD"],
    responses={
        302: {"description": "Redirect to the original URL"},
        200: {"model": ErrorResponse, "description": "Wrong format or unknown short URL"},
    },
    summary="Redirect to original URL",
)
async def redirect_short_url(request: Request, short_url: str):
    """Redirect to the URL stored under a short code."""
    service = request.app.state.service

    try:
        code = service.parse_short_url(short_url)
    except ValueError:
        return JSONResponse(content={"error": WRONG_FORMAT})

    entry = await service.get_entry(code) if code is not None else None

    if entry is None:
        return JSONResponse(content={"error": NOT_FOUND})

    return RedirectResponse(url=entry.original_url, status_code=status.HTTP_302_FOUND)

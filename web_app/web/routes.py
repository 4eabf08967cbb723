"""Informational routes."""

from fastapi import APIRouter

router = APIRouter()

SERVICE_DESCRIPTION = {
    "message": "URL Shortener Microservice",
    "endpoints": {
        "POST /api/shorturl": "Create short URL",
        "GET /api/shorturl/:short_url": "Redirect to original URL",
    },
    "example": {
        "POST /api/shorturl": {
            "body": {"url": "https://www.freecodecamp.org"},
            "response": {
                "original_url": "https://www.freecodecamp.org",
                "short_url": 1,
            },
        },
        "GET /api/shorturl/1": "Redirects to https://www.freecodecamp.org",
    },
}


@router.api_route("/", methods=["GET", "HEAD"], summary="Service description")
async def homepage():
    """Describe the service and its endpoints."""
    return SERVICE_DESCRIPTION

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import logging

from app.schemas.url import ShortenUrlRequest, ShortenUrlResponse
from app.services.shortener import URLShortenerService, get_url_shortener_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_class=PlainTextResponse, tags=["root"])
def root_endpoint():
    return "Hello from URL Shortener!"

@router.post("/api/v1/urls", response_model=ShortenUrlResponse, tags=["urls"])
def shorten_url_endpoint(
    url_request: ShortenUrlRequest,
    service: URLShortenerService = Depends(get_url_shortener_service),
):
    response = service.shorten_url(url_request)
    logger.info(
        f"API success: Shortened {url_request.url[:50]}... to {response.short_code}"
    )
    return response

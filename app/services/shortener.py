from functools import lru_cache
from typing import Callable, Optional
import logging

from app.core.config import DEFAULT_BASE_URL, settings
from app.schemas.url import ShortenUrlRequest, ShortenUrlResponse
from app.services.random_source import RandomSource, get_shared_random_source
from app.utils.encoding import encode_base62


logger = logging.getLogger(__name__)

SHORT_CODE_LENGTH = 8


class URLShortenerService:

    def __init__(
        self,
        random_source: RandomSource,
        base_url: Optional[str] = None,
        encoder: Callable[[float], str] = encode_base62,
    ):
        self.random_source = random_source
        self.base_url = base_url or DEFAULT_BASE_URL
        self.encoder = encoder

    def generate_short_code(self) -> str:
        full_code = self.encoder(self.random_source.next_double())
        return full_code[:SHORT_CODE_LENGTH]

    def shorten_url(self, request: ShortenUrlRequest) -> ShortenUrlResponse:
        short_code = self.generate_short_code()
        logger.debug("Generated short code '%s' for URL: %s", short_code, request.url[:50])
        return ShortenUrlResponse(
            short_url=f"{self.base_url}/{short_code}",
            short_code=short_code,
            original_url=request.url,
        )


@lru_cache
def get_url_shortener_service() -> URLShortenerService:
    return URLShortenerService(get_shared_random_source(), settings.BASE_URL)

# re-export common schemas for simpler imports
from .url import ShortenUrlRequest, ShortenUrlResponse

__all__ = [
    "ShortenUrlRequest",
    "ShortenUrlResponse",
]

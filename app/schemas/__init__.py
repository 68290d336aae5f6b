# re-export common schemas for simpler imports
from .url.request import ShortenRequest
from .url.response import ShortenResponse, StatsResponse
from .error import ErrorResponse

__all__ = [
    "ShortenRequest",
    "ShortenResponse",
    "StatsResponse",
    "ErrorResponse",
]

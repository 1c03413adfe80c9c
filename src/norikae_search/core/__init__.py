"""Core transit search functionality."""

from .exceptions import NetworkError, TransitSearchError, ValidationError
from .extractor import extract_main_content
from .models import (
    MAX_VIA_STATIONS,
    SearchOptions,
    SearchRequest,
    SeatPreference,
    SortOrder,
    TicketType,
    TimeType,
    WalkSpeed,
    build_search_request,
)
from .scraper import YahooTransitScraper
from .url_builder import build_search_url

__all__ = [
    "MAX_VIA_STATIONS",
    "SearchOptions",
    "SearchRequest",
    "SeatPreference",
    "SortOrder",
    "TicketType",
    "TimeType",
    "WalkSpeed",
    "build_search_request",
    "build_search_url",
    "extract_main_content",
    "YahooTransitScraper",
    "TransitSearchError",
    "NetworkError",
    "ValidationError",
]

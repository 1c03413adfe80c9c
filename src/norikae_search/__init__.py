"""Norikae Search Package

A Python package that queries Yahoo! Transit for Japanese train routes,
with CLI and MCP server front ends.
"""

__version__ = "0.1.0"

from .core.models import SearchOptions, SearchRequest
from .core.scraper import YahooTransitScraper

__all__ = ["SearchOptions", "SearchRequest", "YahooTransitScraper"]

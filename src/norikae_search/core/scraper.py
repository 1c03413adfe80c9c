"""Yahoo Transit client: fetch a result page and extract the routes."""

import logging

import requests

from .exceptions import NetworkError
from .extractor import extract_main_content
from .models import SearchRequest
from .url_builder import YAHOO_TRANSIT_SEARCH_URL, build_search_url

logger = logging.getLogger(__name__)


class YahooTransitScraper:
    """Fetches Yahoo Transit route search results."""

    def __init__(
        self,
        timeout: int = 30,
        base_url: str = YAHOO_TRANSIT_SEARCH_URL,
        user_agent: str | None = None,
    ):
        """Initialize the scraper.

        Args:
            timeout: Request timeout in seconds
            base_url: Search endpoint
            user_agent: Optional User-Agent header override
        """
        self.timeout = timeout
        self.base_url = base_url
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
                "DNT": "1",
                "Connection": "keep-alive",
                "Upgrade-Insecure-Requests": "1",
            }
        )
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def build_url(self, request: SearchRequest) -> str:
        """Build the result page URL for a request against this scraper's endpoint."""
        return build_search_url(request, base_url=self.base_url)

    def search_route(
        self,
        request: SearchRequest,
        save_html_path: str | None = None,
    ) -> str:
        """Search for routes and return the extracted result section.

        Args:
            request: Resolved search request
            save_html_path: Optional path to save raw HTML for debugging

        Returns:
            Route section as an HTML fragment or plain text

        Raises:
            NetworkError: If the request or body read fails
        """
        html_content = self.fetch_html(self.build_url(request))

        if save_html_path:
            with open(save_html_path, "w", encoding="utf-8") as f:
                f.write(html_content)

        return extract_main_content(html_content)

    def fetch_html(self, url: str) -> str:
        """Fetch a Yahoo Transit page.

        The body is returned even for non-2xx responses, since the site
        renders its own error pages.

        Args:
            url: Page URL

        Returns:
            Response body as text

        Raises:
            NetworkError: If the request or body read fails
        """
        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            if not response.ok:
                logger.warning(
                    f"Yahoo Transit responded {response.status_code} for {url}"
                )
            return response.text

        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch route data: {str(e)}") from e

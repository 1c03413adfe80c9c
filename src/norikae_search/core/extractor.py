"""Reduce a Yahoo Transit result page to its route section."""

import logging
import re

logger = logging.getLogger(__name__)

ROUTE_DETAIL_CLASS = "routeDetail"
CHANGE_CONDITIONS_SENTINEL = "条件を変更して検索"
FIRST_ROUTE_LABEL = "ルート1"

_FLAGS = re.IGNORECASE | re.DOTALL

NOISE_PATTERNS = [
    re.compile(r"<script[^>]*>.*?</script>", _FLAGS),
    re.compile(r"<style[^>]*>.*?</style>", _FLAGS),
    re.compile(r"<!--.*?-->", re.DOTALL),
]

LAYOUT_PATTERNS = [
    re.compile(rf"<{tag}[^>]*>.*?</{tag}>", _FLAGS)
    for tag in ("nav", "header", "footer", "aside")
]

ROUTE_DETAIL_PATTERN = re.compile(
    rf'<div[^>]*class="[^"]*{ROUTE_DETAIL_CLASS}[^"]*"[^>]*>', re.IGNORECASE
)
TAG_PATTERN = re.compile(r"<[^>]+>")
BLANK_LINES_PATTERN = re.compile(r"\n\s*\n")


def _strip_noise(html: str) -> str:
    for pattern in NOISE_PATTERNS + LAYOUT_PATTERNS:
        html = pattern.sub("", html)
    return html


def _route_detail_fragment(content: str) -> str | None:
    """Return the route markup up to the sentinel, if both can be found."""
    match = ROUTE_DETAIL_PATTERN.search(content)
    if not match:
        return None

    # only a sentinel after the anchor closes the section
    end = content.find(CHANGE_CONDITIONS_SENTINEL, match.start())
    if end == -1:
        return None

    return content[match.start() : end]


def _to_text(content: str) -> str:
    text = TAG_PATTERN.sub("\n", content)
    text = BLANK_LINES_PATTERN.sub("\n", text)
    return text.strip()


def extract_main_content(html: str) -> str:
    """Extract the route results from a Yahoo Transit HTML page.

    Scripts, styles, comments and page chrome (nav, header, footer, aside)
    are removed first. Then the first of these that succeeds is returned:

    1. The ``routeDetail`` div up to the "条件を変更して検索" link, with
       markup intact.
    2. The page as plain text, from "ルート1" up to the same sentinel.
    3. The whole page as plain text.

    Never raises.

    Args:
        html: Raw HTML of the result page

    Returns:
        HTML fragment or plain text
    """
    if not html:
        return ""

    content = _strip_noise(html)

    fragment = _route_detail_fragment(content)
    if fragment is not None:
        logger.debug(f"Extracted routeDetail fragment ({len(fragment)} chars)")
        return fragment

    text = _to_text(content)

    start = text.find(FIRST_ROUTE_LABEL)
    if start != -1:
        # only a sentinel after the anchor closes the section
        end = text.find(CHANGE_CONDITIONS_SENTINEL, start)
        if end != -1:
            logger.debug(f"Extracted route text by anchors ({end - start} chars)")
            return text[start:end]

    logger.debug("No route anchors found, returning full page text")
    return text

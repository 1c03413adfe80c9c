"""Test configuration and fixtures."""

from datetime import datetime

import pytest

from norikae_search.core.models import SearchRequest
from norikae_search.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure every test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now():
    """A fixed 'current time' for default resolution."""
    return datetime(2026, 1, 22, 10, 30)


@pytest.fixture
def sample_request():
    """Tokyo to Kudanshita, 2026-01-22 10:30, default options."""
    return SearchRequest(
        from_station="東京",
        to_station="九段下",
        year=2026,
        month=1,
        day=22,
        hour=10,
        minute=30,
    )


@pytest.fixture
def sample_yahoo_response():
    """Yahoo Transit result page with a routeDetail section."""
    return """<!DOCTYPE html>
<html>
<head>
<title>東京から九段下 - Yahoo!路線情報</title>
<script type="text/javascript">
  window.YAHOO = {"page": "result"};
</script>
<STYLE>.routeDetail { color: red; }</STYLE>
</head>
<body>
<header id="masthead"><a href="/">Yahoo!路線情報</a></header>
<nav class="gnav"><ul><li>条件を変更して検索</li></ul></nav>
<!-- ad slot -->
<div id="srline">
<div class="routeSummary"><ul><li class="time">10:33発→10:45着12分</li><li class="fare">IC優先：178円</li></ul></div>
<div class="routeDetail clearfix">
<div class="station"><ul class="time"><li>10:33発</li></ul><dl><dt>東京</dt></dl></div>
<div class="fareSection"><div class="access"><ul class="info"><li class="transport"><div>東京メトロ東西線</div></li></ul></div></div>
<div class="station"><ul class="time"><li>10:45着</li></ul><dl><dt>九段下</dt></dl></div>
</div>
</div>
<aside class="ads">広告</aside>
<p class="research"><a href="/search/top">条件を変更して検索</a></p>
<footer>Copyright (C) LY Corporation</footer>
</body>
</html>
"""


@pytest.fixture
def sample_text_only_response():
    """Result page without a routeDetail section but with text anchors."""
    return (
        "<html><body><nav>メニュー</nav>"
        '<div class="summary"><h2>ルート1</h2><p>10:30発→10:45着</p><p>IC優先：178円</p></div>'
        '<p><a href="#">条件を変更して検索</a></p>'
        "<footer>フッター</footer></body></html>"
    )

"""Unit tests for CLI components."""

from unittest.mock import Mock, patch

from click.testing import CliRunner

from norikae_search.cli.main import cli
from norikae_search.core.exceptions import NetworkError
from norikae_search.core.models import SortOrder, TimeType


class TestCLI:
    """Test CLI commands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_cli_version(self):
        """Test CLI version option."""
        result = self.runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_cli_help(self):
        """Test CLI help."""
        result = self.runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Norikae Search" in result.output

    def test_url_command(self):
        """URL command prints the search URL without fetching."""
        result = self.runner.invoke(
            cli, ["url", "東京", "九段下", "--datetime", "2026-01-22 10:30"]
        )

        assert result.exit_code == 0
        url = result.output.strip()
        assert url.startswith("https://transit.yahoo.co.jp/search/result?")
        assert "from=%E6%9D%B1%E4%BA%AC" in url
        for param in ("y=2026", "m=01", "d=22", "hh=10", "m1=3", "m2=0", "type=1"):
            assert f"&{param}" in url

    def test_url_command_options(self):
        """Options and via stations are reflected in the URL."""
        result = self.runner.invoke(
            cli,
            [
                "url", "東京", "新宿",
                "--via", "表参道", "--via", "飯田橋",
                "--time-type", "last_train",
                "--sort-by", "fare",
                "--ticket", "cash",
                "--no-shinkansen",
                "--no-ferry",
            ],
        )

        assert result.exit_code == 0
        url = result.output.strip()
        assert "type=2" in url
        assert "&s=1" in url
        assert "ticket=normal" in url
        assert "shin=0" in url
        assert "sr=0" in url
        assert "al=1" in url
        assert url.count("via=") == 2

    def test_invalid_datetime(self):
        """Test invalid datetime format."""
        result = self.runner.invoke(cli, ["url", "東京", "新宿", "--datetime", "tomorrow"])

        assert result.exit_code == 1

    def test_invalid_choice(self):
        """Unknown option values are rejected by click."""
        result = self.runner.invoke(cli, ["url", "東京", "新宿", "--sort-by", "cheapest"])

        assert result.exit_code != 0

    @patch("norikae_search.cli.main.YahooTransitScraper")
    def test_search_command_text_format(self, mock_scraper_class):
        """Test successful search with text output."""
        mock_scraper = Mock()
        mock_scraper.search_route.return_value = "ルート1\n10:33発→10:45着\nIC優先：178円"
        mock_scraper_class.return_value = mock_scraper

        result = self.runner.invoke(
            cli,
            ["search", "東京", "九段下", "--time-type", "arrival", "--sort-by", "transfer"],
        )

        assert result.exit_code == 0
        assert "ルート1" in result.output
        assert "IC優先：178円" in result.output

        request = mock_scraper.search_route.call_args.args[0]
        assert request.from_station == "東京"
        assert request.to_station == "九段下"
        assert request.options.time_type == TimeType.ARRIVAL
        assert request.options.sort_by == SortOrder.TRANSFER
        assert mock_scraper.search_route.call_args.kwargs == {"save_html_path": None}

    @patch("norikae_search.cli.main.YahooTransitScraper")
    def test_search_command_panel_format(self, mock_scraper_class):
        """Test panel output shows the search summary."""
        mock_scraper = Mock()
        mock_scraper.search_route.return_value = "ルート1"
        mock_scraper.build_url.return_value = "https://transit.yahoo.co.jp/search/result?from=x"
        mock_scraper_class.return_value = mock_scraper

        result = self.runner.invoke(
            cli, ["search", "東京", "九段下", "--via", "大手町", "--format", "panel"]
        )

        assert result.exit_code == 0
        assert "Route Search" in result.output
        assert "大手町" in result.output
        assert "ルート1" in result.output

    @patch("norikae_search.cli.main.YahooTransitScraper")
    def test_search_command_with_timeout(self, mock_scraper_class):
        """Test search command with custom timeout."""
        mock_scraper = Mock()
        mock_scraper.search_route.return_value = ""
        mock_scraper_class.return_value = mock_scraper

        result = self.runner.invoke(cli, ["search", "東京", "新宿", "--timeout", "60"])

        assert result.exit_code == 0
        assert mock_scraper_class.call_args.kwargs["timeout"] == 60

    @patch("norikae_search.cli.main.YahooTransitScraper")
    def test_search_command_network_error(self, mock_scraper_class):
        """Test search command with network error."""
        mock_scraper = Mock()
        mock_scraper.search_route.side_effect = NetworkError("Connection refused")
        mock_scraper_class.return_value = mock_scraper

        result = self.runner.invoke(cli, ["search", "東京", "新宿"])

        assert result.exit_code == 1

    @patch("norikae_search.cli.main.YahooTransitScraper")
    def test_search_command_unexpected_error(self, mock_scraper_class):
        """Test search command with unexpected error."""
        mock_scraper = Mock()
        mock_scraper.search_route.side_effect = RuntimeError("boom")
        mock_scraper_class.return_value = mock_scraper

        result = self.runner.invoke(cli, ["search", "東京", "新宿"])

        assert result.exit_code == 1

    def test_config_show(self, monkeypatch):
        """Config show lists the effective settings."""
        monkeypatch.setenv("NORIKAE_REQUEST_TIMEOUT", "45")

        result = self.runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "request_timeout" in result.output
        assert "45" in result.output

    @patch("norikae_search.mcp.server.main_sync")
    def test_serve_command(self, mock_main_sync):
        """Serve starts the MCP server."""
        result = self.runner.invoke(cli, ["serve"])

        assert result.exit_code == 0
        mock_main_sync.assert_called_once_with()

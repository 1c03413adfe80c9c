"""CLI main entry point for Japanese route search."""

import sys
from collections.abc import Callable
from datetime import datetime as dt_module
from typing import Any

import click
from rich.console import Console

from .. import __version__
from ..core import (
    NetworkError,
    SearchRequest,
    SeatPreference,
    SortOrder,
    TicketType,
    TimeType,
    ValidationError,
    WalkSpeed,
    YahooTransitScraper,
    build_search_request,
)
from ..utils.config import get_settings
from .formatters import format_result_panel, format_result_text, format_settings_table

console = Console()
error_console = Console(stderr=True)

TRANSPORT_FLAGS = [
    ("airline", "use_airline", "Use airlines"),
    ("shinkansen", "use_shinkansen", "Use shinkansen"),
    ("express", "use_express", "Use paid express trains"),
    ("highway-bus", "use_highway_bus", "Use highway buses"),
    ("local-bus", "use_local_bus", "Use local buses"),
    ("ferry", "use_ferry", "Use ferries"),
]


def _choices(enum_cls: Any) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


def search_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by the search and url commands."""
    options = [
        click.argument("from_station"),
        click.argument("to_station"),
        click.option(
            "--via",
            multiple=True,
            help="Via station (repeatable, up to 3)",
        ),
        click.option(
            "--datetime",
            "-d",
            "datetime_str",
            help="Date and time (YYYY-MM-DD HH:MM format), defaults to now",
            type=str,
        ),
        click.option("--time-type", type=_choices(TimeType), help="What the time refers to"),
        click.option("--ticket", type=_choices(TicketType), help="Fare type"),
        click.option("--seat", type=_choices(SeatPreference), help="Seat preference"),
        click.option("--walk-speed", type=_choices(WalkSpeed), help="Walking speed"),
        click.option("--sort-by", "-s", type=_choices(SortOrder), help="Sort order"),
    ]
    for flag, dest, help_text in TRANSPORT_FLAGS:
        options.append(
            click.option(
                f"--{flag}/--no-{flag}",
                dest,
                default=True,
                help=help_text,
            )
        )

    for option in reversed(options):
        func = option(func)
    return func


def _build_request(
    from_station: str,
    to_station: str,
    via: tuple[str, ...],
    datetime_str: str | None,
    time_type: str | None,
    ticket: str | None,
    seat: str | None,
    walk_speed: str | None,
    sort_by: str | None,
    **transport: bool,
) -> SearchRequest:
    """Turn CLI parameters into a SearchRequest, exiting on bad input."""
    arguments: dict[str, Any] = {
        "from": from_station,
        "to": to_station,
        "via": list(via),
        "timeType": time_type,
        "ticket": ticket,
        "seatPreference": seat,
        "walkSpeed": walk_speed,
        "sortBy": sort_by,
        **transport,
    }

    if datetime_str:
        try:
            search_datetime = dt_module.strptime(datetime_str, "%Y-%m-%d %H:%M")
        except ValueError:
            error_console.print("[red]Invalid datetime format. Use YYYY-MM-DD HH:MM[/red]")
            sys.exit(1)
        arguments.update(
            year=search_datetime.year,
            month=search_datetime.month,
            day=search_datetime.day,
            hour=search_datetime.hour,
            minute=search_datetime.minute,
        )

    try:
        return build_search_request(arguments, now=dt_module.now())
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Norikae Search - Japanese train routes from Yahoo! Transit."""
    pass


@cli.command()
@search_options
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "panel"]),
    default="text",
    help="Output format",
)
@click.option("--timeout", "-t", type=int, help="Request timeout in seconds")
@click.option(
    "--save-html",
    help="Save raw HTML response to file for debugging",
    type=click.Path(),
)
@click.option("--verbose", "-v", is_flag=True, help="Show tracebacks on errors")
def search(
    output_format: str,
    timeout: int | None,
    save_html: str | None,
    verbose: bool,
    **params: Any,
) -> None:
    """Search for train routes between stations.

    Examples:
        norikae search 東京 九段下
        norikae search 東京 渋谷 --via 表参道
        norikae search 大船 羽田空港 --datetime "2026-01-22 10:30" --time-type arrival
        norikae search 東京 大阪 --sort-by fare --no-shinkansen --format panel
    """
    request = _build_request(**params)
    settings = get_settings()

    try:
        scraper = YahooTransitScraper(
            timeout=timeout or settings.request_timeout,
            base_url=settings.base_url,
            user_agent=settings.user_agent,
        )
        with console.status(
            f"[bold green]Searching route from {request.from_station} to {request.to_station}..."
        ):
            content = scraper.search_route(request, save_html_path=save_html)

        if output_format == "panel":
            format_result_panel(request, scraper.build_url(request), content)
        else:
            format_result_text(content)

    except NetworkError as e:
        error_console.print(f"[red]Network error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


@cli.command()
@search_options
def url(**params: Any) -> None:
    """Print the Yahoo Transit URL for a search without fetching it.

    Examples:
        norikae url 東京 新宿 --via 表参道 --via 飯田橋
    """
    request = _build_request(**params)
    click.echo(YahooTransitScraper(base_url=get_settings().base_url).build_url(request))


@cli.command()
def serve() -> None:
    """Run the MCP server over stdio."""
    from ..mcp.server import main_sync

    main_sync()


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration.

    Values come from NORIKAE_* environment variables or a .env file.
    """
    format_settings_table(get_settings())


if __name__ == "__main__":
    cli()

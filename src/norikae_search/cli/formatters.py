"""Output formatters for CLI display."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.models import SearchRequest
from ..utils.config import Settings

console = Console()


def format_result_text(content: str) -> None:
    """Print the extracted result as is."""
    console.print(content, markup=False, highlight=False)


def format_result_panel(request: SearchRequest, url: str, content: str) -> None:
    """Display the search summary and extracted result in panels."""
    options = request.options
    seat = options.seat_preference.value if options.seat_preference else "-"
    modes = [
        name
        for name, enabled in (
            ("airline", options.use_airline),
            ("shinkansen", options.use_shinkansen),
            ("express", options.use_express),
            ("highway bus", options.use_highway_bus),
            ("local bus", options.use_local_bus),
            ("ferry", options.use_ferry),
        )
        if enabled
    ]

    summary_text = f"""[bold]From:[/bold] {escape(request.from_station)}
[bold]To:[/bold] {escape(request.to_station)}
[bold]Via:[/bold] {escape(", ".join(request.via)) or "-"}
[bold]Date:[/bold] {request.year}-{request.month:02d}-{request.day:02d} {request.hour:02d}:{request.minute:02d} ({options.time_type.value})
[bold]Ticket:[/bold] {options.ticket.value}  [bold]Seat:[/bold] {seat}  [bold]Walk:[/bold] {options.walk_speed.value}  [bold]Sort:[/bold] {options.sort_by.value}
[bold]Transport:[/bold] {", ".join(modes) or "-"}
[bold]URL:[/bold] [link={url}]{escape(url)}[/link]"""

    console.print(Panel(summary_text, title="Route Search", border_style="blue"))
    console.print(
        Panel(escape(content) or "[dim]No content[/dim]", title="Result", border_style="green")
    )


def format_settings_table(settings: Settings) -> None:
    """Display effective settings as a table."""
    table = Table(
        title="Current Configuration (NORIKAE_* overrides)",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name in Settings.model_fields:
        table.add_row(name, str(getattr(settings, name)))

    console.print(table)

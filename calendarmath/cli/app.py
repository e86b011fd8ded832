"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import AppConfig
from ..domain.calendar_math import CalendarMath
from ..domain.exceptions import CalendarMathError

app = typer.Typer(
    name="calendarmath",
    help="Date and time calculations: weekdays, week numbers, weekends and work rotas",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]


def _load_calendar(config_file: Optional[Path]) -> tuple[AppConfig, CalendarMath]:
    """
    Load the configuration and build the calculator it describes.

    Exits with code 1 if the configuration cannot be loaded.
    """
    try:
        config = AppConfig.load_or_default(config_file)
    except (FileNotFoundError, CalendarMathError) as e:
        _fail(e)

    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s"
    )
    return config, CalendarMath.from_config(config)


def _fail(error: object) -> None:
    console.print(f"[bold red]Error:[/bold red] {error}")
    raise typer.Exit(1)


def _run(config_file: Optional[Path], operation):
    """Run ``operation(calendar, config)`` and print its result."""
    config, calendar = _load_calendar(config_file)
    try:
        result = operation(calendar, config)
    except (CalendarMathError, ValueError) as e:
        _fail(e)
    console.print(result)
    return result


@app.command()
def timestamp(date: str, config_file: ConfigOption = None):
    """Milliseconds since 01 Jan 1970 00:00:00 UTC."""
    _run(config_file, lambda cal, _: cal.date_to_timestamp(cal.parser.parse_strict(date)))


@app.command("time")
def time_of_day(date: str, config_file: ConfigOption = None):
    """Time of day as HH:MM:SS."""
    _run(config_file, lambda cal, _: cal.get_time(date))


@app.command()
def day_name(date: str, config_file: ConfigOption = None):
    """Name of the weekday."""
    _run(config_file, lambda cal, _: cal.get_day_name(cal.parser.parse_strict(date)))


@app.command()
def next_friday(date: str, config_file: ConfigOption = None):
    """The next Friday after DATE (a week later if DATE is a Friday)."""
    _run(config_file, lambda cal, _: cal.get_next_friday(date).to_iso8601_string())


@app.command()
def days_in_month(
    month: Annotated[int, typer.Argument(min=1, max=12)],
    year: int,
    config_file: ConfigOption = None
):
    """Number of days in MONTH of YEAR."""
    _run(config_file, lambda cal, _: cal.get_count_days_in_month(month, year))


@app.command()
def period_days(start: str, end: str, config_file: ConfigOption = None):
    """Number of days from START to END, both included."""
    _run(
        config_file,
        lambda cal, _: cal.get_count_days_on_period(
            cal.parser.parse_strict(start),
            cal.parser.parse_strict(end)
        )
    )


@app.command()
def in_period(date: str, start: str, end: str, config_file: ConfigOption = None):
    """Whether DATE lies between START and END, both included."""
    def operation(cal: CalendarMath, _):
        for value in (date, start, end):
            cal.parser.parse_strict(value)
        return cal.is_date_in_period(date, {"start": start, "end": end})

    _run(config_file, operation)


@app.command("format")
def format_date(date: str, config_file: ConfigOption = None):
    """Format DATE as M/D/YYYY, h:mm:ss AM/PM (UTC)."""
    _run(config_file, lambda cal, _: cal.format_date(cal.parser.parse_strict(date)))


@app.command()
def weekends(
    month: Annotated[int, typer.Argument(min=1, max=12)],
    year: int,
    config_file: ConfigOption = None
):
    """Number of Saturdays and Sundays in MONTH of YEAR."""
    _run(config_file, lambda cal, _: cal.get_count_weekends_in_month(month, year))


@app.command()
def week_number(date: str, config_file: ConfigOption = None):
    """ISO week number of DATE."""
    _run(config_file, lambda cal, _: cal.get_week_number_by_date(date))


@app.command("friday-13th")
def friday_13th(date: str, config_file: ConfigOption = None):
    """The next Friday the 13th after DATE."""
    _run(config_file, lambda cal, _: cal.get_next_friday_the_13th(date).to_date_string())


@app.command()
def quarter(date: str, config_file: ConfigOption = None):
    """Quarter (1-4) of DATE."""
    _run(config_file, lambda cal, _: cal.get_quarter(date))


@app.command()
def leap_year(date: str, config_file: ConfigOption = None):
    """Whether the year of DATE is a leap year."""
    _run(config_file, lambda cal, _: cal.is_leap_year(date))


@app.command()
def schedule(
    start: Annotated[str, typer.Argument(help="First day of the period (DD-MM-YYYY)")],
    end: Annotated[str, typer.Argument(help="Last day of the period (DD-MM-YYYY)")],
    work_days: Annotated[int, typer.Option("--work", "-w", min=0, help="Consecutive working days")] = 5,
    off_days: Annotated[int, typer.Option("--off", "-o", min=0, help="Consecutive days off")] = 2,
    config_file: ConfigOption = None
):
    """
    List the working days of a repeating on/off rota.

    Examples:

        calendarmath schedule 01-01-2024 15-01-2024 --work 1 --off 3
    """
    config, calendar = _load_calendar(config_file)

    for value in (start, end):
        if calendar.parser.parse_day(value, config.schedule_format) is None:
            _fail(f"'{value}' does not match {config.schedule_format}")

    try:
        days = calendar.get_work_schedule(
            {"start": start, "end": end},
            work_days,
            off_days,
            fmt=config.schedule_format
        )
    except ValueError as e:
        _fail(e)

    if not days:
        console.print("[yellow]No working days in this period.[/yellow]")
        return

    for day in days:
        console.print(f"  {day}")
    console.print(f"\n[bold green]{len(days)} working day(s)[/bold green]")


@app.command("month")
def month_table(
    month: Annotated[int, typer.Argument(min=1, max=12)],
    year: int,
    config_file: ConfigOption = None
):
    """
    Show a summary table for MONTH of YEAR.
    """
    _, calendar = _load_calendar(config_file)
    summary = calendar.month_summary(month, year)

    table = Table(
        title=summary["month"],
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Figure", style="bold yellow")
    table.add_column("Value")

    table.add_row("Days", str(summary["days"]))
    table.add_row("Weekend days", str(summary["weekend_days"]))
    table.add_row("Quarter", f"Q{summary['quarter']}")
    table.add_row("Leap year", "yes" if summary["leap_year"] else "no")
    table.add_row("Week of the 1st", str(summary["week_of_first_day"]))
    table.add_row("Next Friday the 13th", summary["next_friday_13th"].to_date_string())

    console.print()
    console.print(table)
    console.print()


@app.command()
def show_config(config_file: ConfigOption = None):
    """
    Show the effective configuration.
    """
    config, _ = _load_calendar(config_file)

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="bold yellow")
    table.add_column("Value", style="dim")

    table.add_row("timezone", config.timezone)
    table.add_row("log_level", config.log_level)
    table.add_row("input_formats", ", ".join(config.input_formats))
    table.add_row("schedule_format", config.schedule_format)

    console.print(table)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]calendarmath[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()

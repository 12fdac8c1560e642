"""CLI commands for time-scale conversion and calendar dates."""

import json
from typing import Optional

import click
import dateutil.parser

from ..errors import ConfigurationError, ErfacoreError
from ..space_time.julian import d2dtf
from ..space_time.julian_calc import jd2cal
from ..space_time.leap_seconds import dat
from ..space_time.timescales import TimeScale, convert as convert_date
from .common import echo_warnings, parse_date_input

SCALE_NAMES = [s.value for s in TimeScale]


@click.command()
@click.argument("date")
@click.option(
    "--from",
    "from_scale",
    type=click.Choice(SCALE_NAMES, case_sensitive=False),
    default="UTC",
    show_default=True,
    help="Time scale of DATE",
)
@click.option(
    "--to",
    "to_scale",
    type=click.Choice(SCALE_NAMES, case_sensitive=False),
    default="TT",
    show_default=True,
    help="Time scale to convert to",
)
@click.option("--dut1", type=float, help="UT1-UTC in seconds (needed for UT1)")
@click.option("--dtr", type=float, help="TDB-TT in seconds (needed for TDB and TCB)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def convert(
    date: str,
    from_scale: str,
    to_scale: str,
    dut1: Optional[float],
    dtr: Optional[float],
    output_format: str,
) -> None:
    """Convert DATE between time scales.

    DATE is a Julian Date, a "jd1+jd2" pair, a calendar date, or "now".
    """
    source = TimeScale.from_name(from_scale)
    target = TimeScale.from_name(to_scale)
    start = parse_date_input(date, source)

    try:
        result = convert_date(start, source, target, dut1=dut1, dtr=dtr)
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    except ErfacoreError as e:
        raise click.ClickException(str(e))

    echo_warnings(result.warnings)
    jd1, jd2 = result.value

    if output_format == "json":
        data = {
            "scale": target.value,
            "jd1": jd1,
            "jd2": jd2,
            "warnings": [w.name for w in result.warnings],
        }
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"{target.value}: {jd1!r} + {jd2!r}")
    fields = d2dtf(target, 6, result.value).value
    click.echo(
        f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}.{fields.fraction:06d}"
    )


@click.command("leap-seconds")
@click.argument("date")
def leap_seconds(date: str) -> None:
    """Show TAI-UTC in seconds for a calendar DATE (e.g. 2017-01-01)."""
    try:
        parsed = dateutil.parser.parse(date)
    except (ValueError, OverflowError):
        raise click.BadParameter(f"Invalid date format: {date}")

    fraction = (parsed.hour * 3600 + parsed.minute * 60 + parsed.second) / 86400.0
    try:
        result = dat(parsed.year, parsed.month, parsed.day, fraction)
    except ErfacoreError as e:
        raise click.ClickException(str(e))

    echo_warnings(result.warnings)
    click.echo(f"TAI-UTC: {result.value:.7f} s")


@click.command()
@click.argument("jd1", type=float)
@click.argument("jd2", type=float, default=0.0)
@click.option(
    "--scale",
    type=click.Choice(SCALE_NAMES, case_sensitive=False),
    default="UTC",
    show_default=True,
    help="Time scale of the date",
)
@click.option("--ndp", type=int, default=3, show_default=True, help="Decimal places of seconds")
def calendar(jd1: float, jd2: float, scale: str, ndp: int) -> None:
    """Show the calendar date of the Julian Date JD1 + JD2."""
    try:
        cal = jd2cal((jd1, jd2))
        result = d2dtf(scale, ndp, (jd1, jd2))
    except ErfacoreError as e:
        raise click.ClickException(str(e))

    echo_warnings(result.warnings)
    f = result.value
    seconds = f"{f.second:02d}"
    if ndp > 0:
        seconds += f".{f.fraction:0{ndp}d}"
    click.echo(f"{f.year:04d}-{f.month:02d}-{f.day:02d} {f.hour:02d}:{f.minute:02d}:{seconds}")
    click.echo(f"Fraction of day: {cal.fraction!r}")

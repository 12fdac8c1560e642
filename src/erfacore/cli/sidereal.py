"""CLI command for sidereal time."""

import click

from ..angles import a2tf
from ..constants import DD2R
from ..errors import ErfacoreError, merge_warnings
from ..prenut.bias_precession_nutation import PrecessionNutationModel
from ..space_time.sidereal import era00, gast, gmst06, local_sidereal_time
from ..space_time.timescales import TimeScale, tai_to_tt, utc_to_tai, utc_to_ut1
from .common import echo_warnings, parse_date_input


def format_hours(angle: float) -> str:
    """Format an angle in radians as HHhMMmSS.SSSs."""
    sign, h, m, s, frac = a2tf(3, angle)
    return f"{'-' if sign == '-' else ''}{h:02d}h{m:02d}m{s:02d}.{frac:03d}s"


@click.command()
@click.argument("date", default="now")
@click.option(
    "--longitude",
    type=float,
    default=0.0,
    show_default=True,
    help="Observer longitude in degrees, positive east",
)
@click.option("--dut1", type=float, default=0.0, show_default=True, help="UT1-UTC in seconds")
@click.option(
    "--model",
    type=click.Choice([m.value for m in PrecessionNutationModel], case_sensitive=False),
    default=PrecessionNutationModel.IAU2006_2000A.value,
    show_default=True,
    help="Precession-nutation model for apparent sidereal time",
)
def sidereal(date: str, longitude: float, dut1: float, model: str) -> None:
    """Show Earth rotation angle and sidereal time for a UTC DATE."""
    utc = parse_date_input(date, TimeScale.UTC)
    try:
        ut1_result = utc_to_ut1(utc, dut1)
        tai_result = utc_to_tai(utc)
        ut1 = ut1_result.value
        tt = tai_to_tt(tai_result.value)
        era = era00(ut1)
        gmst = gmst06(ut1, tt)
        gst = gast(ut1, tt, model)
    except ErfacoreError as e:
        raise click.ClickException(str(e))

    echo_warnings(merge_warnings(ut1_result.warnings, tai_result.warnings))

    elong = longitude * DD2R
    click.echo(f"ERA:  {format_hours(era)}")
    click.echo(f"GMST: {format_hours(gmst)}")
    click.echo(f"GAST: {format_hours(gst)}")
    click.echo(f"LMST: {format_hours(local_sidereal_time(gmst, elong))}")
    click.echo(f"LAST: {format_hours(local_sidereal_time(gst, elong))}")

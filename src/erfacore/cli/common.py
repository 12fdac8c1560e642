"""
Command-line interface utilities for erfacore.

This module provides the logging setup shared by the commands and the
parsing of date arguments.
"""

import logging
from argparse import Namespace
from datetime import datetime
from typing import Any, Dict, Union

import click
import dateutil.parser
import pytz

from ..errors import ErfacoreError
from ..logging import set_log_level
from ..space_time.julian import TwoPartDate, dtf2d
from ..space_time.pythonic_datetimes import calendar_fields
from ..space_time.timescales import TimeScale


def configure_logging(args: Union[Dict[str, Any], Namespace]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line arguments (as a dictionary or Namespace)
    """
    if isinstance(args, dict):
        quiet = args.get("quiet", False)
        debug = args.get("debug", False)
        verbosity = args.get("verbose", 0)
    else:
        quiet = getattr(args, "quiet", False)
        debug = getattr(args, "debug", False)
        verbosity = getattr(args, "verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    logging.getLogger().setLevel(log_level)
    set_log_level(log_level)

    logging.getLogger().debug(f"Logging configured with level {logging.getLevelName(log_level)}")


def parse_date_input(date_str: str, scale: TimeScale = TimeScale.UTC) -> TwoPartDate:
    """Parse a date argument into a two-part Julian Date.

    Args:
        date_str: One of:
            - a Julian Date (e.g. "2453750.892100694")
            - a pair "jd1+jd2" (e.g. "2453750.5+0.892100694")
            - a calendar date and time (e.g. "2006-01-15T21:24:37.5"),
              read in ``scale``; any timezone offset is applied first
            - "now"
        scale: Time scale a calendar date is expressed in

    Returns:
        TwoPartDate

    Raises:
        click.BadParameter: If the string cannot be read as a date
    """
    text = date_str.strip("' ")
    if text.lower() == "now":
        dt = datetime.now(pytz.UTC)
        return _calendar_to_two_part(dt, scale)

    if "+" in text and ":" not in text:
        first, _, second = text.partition("+")
        try:
            return TwoPartDate(float(first), float(second))
        except ValueError:
            pass

    try:
        return TwoPartDate(float(text), 0.0)
    except ValueError:
        pass

    try:
        dt = dateutil.parser.isoparse(text)
    except ValueError:
        try:
            dt = dateutil.parser.parse(text)
        except (ValueError, OverflowError):
            raise click.BadParameter(f"Invalid date format: {date_str}")

    return _calendar_to_two_part(dt, scale)


def _calendar_to_two_part(dt: datetime, scale: TimeScale) -> TwoPartDate:
    try:
        result = dtf2d(scale, *calendar_fields(dt))
    except ErfacoreError as e:
        raise click.BadParameter(str(e))
    echo_warnings(result.warnings)
    return result.value


def echo_warnings(warnings) -> None:
    """Report result warnings on stderr."""
    for warning in warnings:
        click.echo(f"Warning: {warning.value}", err=True)

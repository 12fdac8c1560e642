"""Calendars, two-part Julian Dates, time scales and sidereal time."""

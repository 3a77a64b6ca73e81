"""Shared formatting and parsing utilities"""

import re
from datetime import date, datetime
from typing import NamedTuple, Optional, Union

WEEKDAY_NAMES = ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]

_ZIP_CITY_PATTERN = re.compile(r"^(\d{4,5})\s+(.+)$")


class ParsedLocation(NamedTuple):
    street: str
    zip_city: str
    postal_code: Optional[str]
    city: Optional[str]


def parse_location(location: str) -> ParsedLocation:
    """
    Split a location like "Hauptstraße 1, 12345 Musterstadt".

    Args:
        location: Free-text location, expected shape "<street>, <postal-code> <city>"

    Returns:
        ParsedLocation. Anything that does not fit the expected shape is kept
        as street with empty zip/city parts.
    """
    parts = location.split(",")
    if len(parts) < 2:
        return ParsedLocation(street=location.strip(), zip_city="", postal_code=None, city=None)

    street = parts[0].strip()
    zip_city = ",".join(parts[1:]).strip()

    match = _ZIP_CITY_PATTERN.match(zip_city)
    if match:
        return ParsedLocation(street, zip_city, match.group(1), match.group(2).strip())
    return ParsedLocation(street, zip_city, None, zip_city or None)


def format_address(
    strasse: Optional[str],
    haus_nr: Optional[str],
    plz: Optional[str],
    ort: Optional[str],
) -> str:
    """Format a customer address as "Street No, PLZ Ort", skipping missing parts"""
    parts = []
    if strasse:
        parts.append(strasse + (f" {haus_nr}" if haus_nr else ""))
    if plz or ort:
        parts.append(" ".join(p for p in (plz, ort) if p))
    return ", ".join(parts)


def format_short_date(d: Union[date, datetime]) -> str:
    """Format date as DD.MM. (German short form)"""
    return f"{d.day:02d}.{d.month:02d}."


def format_relative_date(value: datetime, now: datetime) -> str:
    """
    Human readable age of a timestamp in German.

    Returns "Heute", "Gestern", "Vor N Tagen" for the last week and the short
    date otherwise.
    """
    diff_days = int((now - value).total_seconds() // 86400)

    if diff_days == 0:
        return "Heute"
    if diff_days == 1:
        return "Gestern"
    if 1 < diff_days < 7:
        return f"Vor {diff_days} Tagen"
    return format_short_date(value)

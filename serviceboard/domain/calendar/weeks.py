"""
Week arithmetic for the maintenance calendar.

All functions work on calendar days. Datetimes are reduced to their date
before any comparison so the time of day never moves a task to another day.
"""

from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union[date, datetime]


def as_day(value: DateLike) -> date:
    """Drop the time of day from a datetime, pass dates through"""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_same_day(first: DateLike, second: DateLike) -> bool:
    """Check if two dates fall on the same calendar day"""
    return as_day(first) == as_day(second)


def is_weekend(value: DateLike) -> bool:
    return as_day(value).weekday() >= 5


def start_of_week(value: DateLike) -> date:
    """Monday of the week containing ``value``"""
    day = as_day(value)
    return day - timedelta(days=day.weekday())


def end_of_week(value: DateLike) -> date:
    """Sunday of the week containing ``value``"""
    return start_of_week(value) + timedelta(days=6)


def week_dates(anchor: DateLike, weeks: int) -> list[list[date]]:
    """
    Build ``weeks`` full Monday-to-Sunday blocks starting at the anchor's week.

    Weekend days are always part of a block, views that only show weekdays
    drop them when rendering.
    """
    monday = start_of_week(anchor)
    return [
        [monday + timedelta(days=week * 7 + offset) for offset in range(7)]
        for week in range(weeks)
    ]


def shift_anchor(anchor: DateLike, steps: int) -> date:
    """Move the anchor by whole weeks (negative steps go back)"""
    return as_day(anchor) + timedelta(days=7 * steps)


def iso_week_number(value: DateLike) -> int:
    """
    ISO-8601 week number.

    The week belongs to the year of its Thursday, so 2023-12-31 is week 52
    and 2024-12-30 is already week 1 (of 2025).
    """
    return as_day(value).isocalendar()[1]


def iso_week_year(value: DateLike) -> int:
    """ISO-8601 year the week of ``value`` is counted in"""
    return as_day(value).isocalendar()[0]


def date_from_iso_week(week: int, year: int) -> date:
    """Monday of ISO week ``week`` in ``year``"""
    return date.fromisocalendar(year, week, 1)

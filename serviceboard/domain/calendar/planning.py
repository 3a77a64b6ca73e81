"""Tour planning week picker and range statistics"""

import logging
from datetime import date
from typing import Iterable

from .schemas import MaintenanceStatus, MaintenanceTask, PlanningStats, PlanningWeek
from .weeks import date_from_iso_week, end_of_week, iso_week_number, iso_week_year, shift_anchor

logger = logging.getLogger(__name__)


def available_weeks(today: date, count: int = 12) -> list[PlanningWeek]:
    """Current ISO week and the following ``count - 1`` weeks, labelled "KW n" """
    current_year = today.year
    weeks = []
    for offset in range(count):
        day = shift_anchor(today, offset)
        week_number = iso_week_number(day)
        year = iso_week_year(day)
        label = f"KW {week_number}"
        if year != current_year:
            label += f" ({year})"
        weeks.append(PlanningWeek(week_number=week_number, year=year, label=label))
    return weeks


def planning_stats(
    tasks: Iterable[MaintenanceTask], start_week: PlanningWeek, end_week: PlanningWeek
) -> PlanningStats:
    """Count tasks between the Monday of the start week and the Sunday of the end week"""
    range_start = date_from_iso_week(start_week.week_number, start_week.year)
    range_end = end_of_week(date_from_iso_week(end_week.week_number, end_week.year))

    in_range = [t for t in tasks if range_start <= t.scheduled_date <= range_end]
    counts = {status: 0 for status in MaintenanceStatus}
    for task in in_range:
        counts[task.maintenance_status] += 1

    return PlanningStats(
        total=len(in_range),
        unplanned=counts[MaintenanceStatus.UNPLANNED],
        not_answered=counts[MaintenanceStatus.NOT_ANSWERED],
        contacted=counts[MaintenanceStatus.CONTACTED],
        planned=counts[MaintenanceStatus.PLANNED],
    )


def start_planning(start_week: PlanningWeek, end_week: PlanningWeek) -> dict:
    """Route planning is not implemented, the request is only recorded"""
    logger.info(f"🗺️ Tour planning requested for {start_week.label} - {end_week.label}")
    return {
        "message": "Tour planning is not available yet",
        "startWeek": start_week.label,
        "endWeek": end_week.label,
    }

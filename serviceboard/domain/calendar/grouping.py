"""
Calendar grouping engine.

Turns a flat list of maintenance tasks into the week/day grid of the
planning calendar. Everything here is a pure function of its inputs: the
technician list and status labels come in through CalendarConfig and the
current day is passed explicitly.
"""

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ...shared.formatting import WEEKDAY_NAMES, format_short_date
from .schemas import (
    CalendarConfig,
    CalendarFilters,
    CalendarGrid,
    CalendarView,
    DayCell,
    MaintenanceTask,
    TechnicianGroup,
    WeekBlock,
)
from .weeks import is_same_day, is_weekend, iso_week_number, week_dates

WORKDAYS = [0, 1, 2, 3, 4]


def group_tasks_by_date(tasks: Iterable[MaintenanceTask]) -> dict[date, list[MaintenanceTask]]:
    """Bucket tasks by their scheduled calendar day"""
    grouped: dict[date, list[MaintenanceTask]] = defaultdict(list)
    for task in tasks:
        grouped[task.scheduled_date].append(task)
    return dict(grouped)


def group_tasks_by_technician(
    tasks: Iterable[MaintenanceTask],
) -> dict[Optional[str], list[MaintenanceTask]]:
    """Bucket tasks by technician id, unassigned tasks land under None"""
    grouped: dict[Optional[str], list[MaintenanceTask]] = {}
    for task in tasks:
        grouped.setdefault(task.technician_id, []).append(task)
    return grouped


def is_task_visible(task: MaintenanceTask, filters: CalendarFilters) -> bool:
    if task.maintenance_status not in filters.statuses:
        return False
    if task.technician_id is None:
        return filters.include_unassigned
    return filters.technicians.includes(task.technician_id)


def count_visible(tasks: Iterable[MaintenanceTask], filters: CalendarFilters) -> int:
    return sum(1 for task in tasks if is_task_visible(task, filters))


def _ordered_technician_ids(
    by_technician: dict[Optional[str], list[MaintenanceTask]], config: CalendarConfig
) -> list[str]:
    """Configured technicians first, unknown ids after in order of appearance"""
    known = [tech.id for tech in config.technicians if tech.id in by_technician]
    unknown = [tid for tid in by_technician if tid is not None and tid not in known]
    return known + unknown


def build_day(
    day: date,
    day_tasks: list[MaintenanceTask],
    filters: CalendarFilters,
    config: CalendarConfig,
    today: date,
) -> DayCell:
    status_filtered = [t for t in day_tasks if t.maintenance_status in filters.statuses]
    by_technician = group_tasks_by_technician(status_filtered)

    groups = [
        TechnicianGroup(
            technician_id=tech_id,
            technician=config.technician(tech_id),
            tasks=by_technician[tech_id],
        )
        for tech_id in _ordered_technician_ids(by_technician, config)
        if filters.technicians.includes(tech_id)
    ]
    unassigned = by_technician.get(None, []) if filters.include_unassigned else []

    return DayCell(
        day=day,
        weekday=day.weekday(),
        weekday_name=WEEKDAY_NAMES[day.weekday()],
        label=format_short_date(day),
        is_today=is_same_day(day, today),
        is_weekend=is_weekend(day),
        technician_groups=groups,
        unassigned=unassigned,
        total_count=len(day_tasks),
        visible_count=sum(len(g.tasks) for g in groups) + len(unassigned),
    )


def build_calendar_grid(
    tasks: Iterable[MaintenanceTask],
    view: CalendarView,
    filters: CalendarFilters,
    config: CalendarConfig,
    today: date,
) -> CalendarGrid:
    """
    Compute the calendar grid for the visible window.

    Tasks outside the window are bucketed but never shown. Weekend days are
    always part of the grid, they are only listed in ``displayed_weekdays``
    when at least one visible task falls on them.
    """
    tasks_by_date = group_tasks_by_date(tasks)

    weeks = []
    for dates in week_dates(view.anchor, view.view_range.weeks):
        days = [
            build_day(d, tasks_by_date.get(d, []), filters, config, today) for d in dates
        ]
        weeks.append(
            WeekBlock(
                week_number=iso_week_number(dates[0]),
                start=dates[0],
                days=days,
                visible_count=sum(cell.visible_count for cell in days),
            )
        )

    weekday_totals = [sum(week.days[i].visible_count for week in weeks) for i in range(7)]
    displayed = WORKDAYS + [i for i in (5, 6) if weekday_totals[i] > 0]

    return CalendarGrid(
        mode=view.view_mode,
        today=today,
        weeks=weeks,
        displayed_weekdays=displayed,
        weekday_totals=weekday_totals,
        total_visible=sum(week.visible_count for week in weeks),
    )

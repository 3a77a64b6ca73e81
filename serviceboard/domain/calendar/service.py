"""Calendar service - Maintenance planning state and task actions"""

import logging
from datetime import date
from typing import Callable, Iterable, Optional

from fastapi import HTTPException

from ...config import DEFAULT_VIEW_MODE, DEFAULT_VIEW_RANGE, PLANNING_WEEK_COUNT
from . import planning
from . import filters as filter_state
from .filters import STATUS_LABELS, default_filters
from .grouping import build_calendar_grid
from .schemas import (
    CalendarConfig,
    CalendarFilters,
    CalendarGrid,
    CalendarView,
    CalendarViewMode,
    CalendarViewRange,
    ConfirmationStatus,
    FilterToggle,
    FilterToggleRequest,
    MaintenanceTask,
    PlanningRange,
    PlanningStats,
    PlanningWeek,
    SchedulingStatus,
    Technician,
)
from .weeks import shift_anchor, start_of_week

logger = logging.getLogger(__name__)


def build_calendar_config(technicians: Iterable[Technician]) -> CalendarConfig:
    """Calendar configuration with the default German status labels"""
    return CalendarConfig(technicians=list(technicians), statuses=dict(STATUS_LABELS))


class CalendarService:
    """
    Holds the task list and view state of the maintenance calendar.

    ``today`` is captured once on creation and only refreshed by
    go_to_today(), so a long running view never re-evaluates it implicitly.
    """

    def __init__(
        self,
        tasks: Iterable[MaintenanceTask],
        config: CalendarConfig,
        clock: Callable[[], date] = date.today,
        view_range: str = DEFAULT_VIEW_RANGE,
        view_mode: str = DEFAULT_VIEW_MODE,
    ):
        self.config = config
        self.clock = clock
        self.today = clock()
        self.view = CalendarView(
            anchor=start_of_week(self.today),
            view_range=CalendarViewRange(view_range),
            view_mode=CalendarViewMode(view_mode),
        )
        self._tasks: list[MaintenanceTask] = list(tasks)

    @property
    def tasks(self) -> list[MaintenanceTask]:
        return list(self._tasks)

    def default_filters(self) -> CalendarFilters:
        return default_filters(self.config.technicians)

    def get_task(self, task_id: str) -> MaintenanceTask:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise HTTPException(status_code=404, detail="Maintenance task not found")

    # View state

    def grid(
        self, filters: Optional[CalendarFilters] = None, view: Optional[CalendarView] = None
    ) -> CalendarGrid:
        return build_calendar_grid(
            self._tasks,
            view or self.view,
            filters or self.default_filters(),
            self.config,
            self.today,
        )

    def navigate(self, direction: int) -> CalendarView:
        """Move the window by ``direction`` weeks"""
        self.view = self.view.model_copy(
            update={"anchor": shift_anchor(self.view.anchor, direction)}
        )
        return self.view

    def go_to_today(self) -> CalendarView:
        self.today = self.clock()
        self.view = self.view.model_copy(update={"anchor": start_of_week(self.today)})
        return self.view

    def set_view_range(self, view_range: CalendarViewRange) -> CalendarView:
        self.view = self.view.model_copy(update={"view_range": view_range})
        return self.view

    def set_view_mode(self, view_mode: CalendarViewMode) -> CalendarView:
        self.view = self.view.model_copy(update={"view_mode": view_mode})
        return self.view

    def update_view(
        self,
        view_range: Optional[CalendarViewRange] = None,
        view_mode: Optional[CalendarViewMode] = None,
    ) -> CalendarView:
        """Persist the range and orientation chosen in the calendar header"""
        if view_range is not None:
            self.set_view_range(view_range)
        if view_mode is not None:
            self.set_view_mode(view_mode)
        return self.view

    def toggle_filter(self, data: FilterToggleRequest) -> CalendarFilters:
        """Apply one dropdown click to the given filters and return the result"""
        current = data.filters
        technicians = self.config.technicians

        if data.toggle == FilterToggle.SHOW_ALL_TECHNICIANS:
            return filter_state.toggle_show_all_technicians(current, technicians)
        if data.toggle == FilterToggle.ALL_STATUSES:
            return current.model_copy(
                update={"statuses": filter_state.toggle_all_statuses(current.statuses)}
            )
        if data.toggle == FilterToggle.TECHNICIAN:
            if not data.technician_id:
                raise HTTPException(status_code=400, detail="technician_id is required")
            selection = filter_state.toggle_technician(
                current.technicians, data.technician_id, technicians
            )
            return current.model_copy(update={"technicians": selection})

        if data.status is None:
            raise HTTPException(status_code=400, detail="status is required")
        return current.model_copy(
            update={"statuses": filter_state.toggle_status(current.statuses, data.status)}
        )

    # Task actions

    def confirm_task(self, task_id: str) -> MaintenanceTask:
        """Mark a visit as confirmed by the customer"""
        logger.info(f"✅ Confirming maintenance task {task_id}")
        return self._replace_task(
            task_id,
            scheduling_status=SchedulingStatus.CONFIRMED,
            confirmation_status=ConfirmationStatus.CONFIRMED,
        )

    def cancel_task(self, task_id: str) -> MaintenanceTask:
        """Mark a visit as cancelled"""
        logger.info(f"❌ Cancelling maintenance task {task_id}")
        return self._replace_task(
            task_id,
            scheduling_status=SchedulingStatus.CANCELLED,
            confirmation_status=ConfirmationStatus.CANCELLED,
        )

    def _replace_task(self, task_id: str, **updates) -> MaintenanceTask:
        current = self.get_task(task_id)
        replacement = current.model_copy(update=updates)
        self._tasks = [replacement if t.id == task_id else t for t in self._tasks]
        return replacement

    # Tour planning

    def planning_weeks(self, count: int = PLANNING_WEEK_COUNT) -> list[PlanningWeek]:
        return planning.available_weeks(self.today, count)

    def planning_stats(self, selection: PlanningRange) -> PlanningStats:
        return planning.planning_stats(self._tasks, selection.start_week, selection.end_week)

    def start_planning(self, selection: PlanningRange) -> dict:
        return planning.start_planning(selection.start_week, selection.end_week)

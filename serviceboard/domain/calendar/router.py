"""Calendar router - FastAPI endpoints for the maintenance calendar"""

import logging

from fastapi import APIRouter, Depends, Request

from .schemas import (
    CalendarFilters,
    CalendarGrid,
    CalendarGridRequest,
    CalendarStateResponse,
    CalendarView,
    FilterToggleRequest,
    MaintenanceTask,
    NavigateRequest,
    PlanningRange,
    PlanningStats,
    PlanningWeek,
    ViewUpdateRequest,
)
from .service import CalendarService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calendar", tags=["Calendar"])


def get_calendar_service(request: Request) -> CalendarService:
    """The calendar service lives on the application for its whole lifetime"""
    return request.app.state.calendar_service


# ============================================================================
# VIEW
# ============================================================================


@router.get("/state", response_model=CalendarStateResponse)
async def get_calendar_state(service: CalendarService = Depends(get_calendar_service)):
    """Current window, default filters and reference data for the calendar header"""
    return CalendarStateResponse(
        today=service.today,
        view=service.view,
        default_filters=service.default_filters(),
        technicians=service.config.technicians,
        statuses=service.config.statuses,
    )


@router.post("/grid", response_model=CalendarGrid)
async def get_calendar_grid(
    data: CalendarGridRequest,
    service: CalendarService = Depends(get_calendar_service),
):
    """Compute the week/day grid for the given filters"""
    overrides = {
        key: value
        for key, value in {
            "anchor": data.anchor,
            "view_range": data.view_range,
            "view_mode": data.view_mode,
        }.items()
        if value is not None
    }
    view = service.view.model_copy(update=overrides)
    return service.grid(data.filters, view)


@router.post("/navigate", response_model=CalendarView)
async def navigate_calendar(
    data: NavigateRequest,
    service: CalendarService = Depends(get_calendar_service),
):
    """Move the visible window by whole weeks"""
    return service.navigate(data.direction)


@router.post("/today", response_model=CalendarView)
async def go_to_today(service: CalendarService = Depends(get_calendar_service)):
    """Jump back to the current week"""
    return service.go_to_today()


@router.post("/view", response_model=CalendarView)
async def update_view(
    data: ViewUpdateRequest,
    service: CalendarService = Depends(get_calendar_service),
):
    """Change the number of visible weeks and the orientation"""
    return service.update_view(data.view_range, data.view_mode)


@router.post("/filters/toggle", response_model=CalendarFilters)
async def toggle_filter(
    data: FilterToggleRequest,
    service: CalendarService = Depends(get_calendar_service),
):
    return service.toggle_filter(data)


# ============================================================================
# TASK ACTIONS
# ============================================================================


@router.get("/tasks", response_model=list[MaintenanceTask])
async def get_tasks(service: CalendarService = Depends(get_calendar_service)):
    return service.tasks


@router.post("/tasks/{task_id}/confirm", response_model=MaintenanceTask)
async def confirm_task(task_id: str, service: CalendarService = Depends(get_calendar_service)):
    """Mark a maintenance visit as confirmed"""
    return service.confirm_task(task_id)


@router.post("/tasks/{task_id}/cancel", response_model=MaintenanceTask)
async def cancel_task(task_id: str, service: CalendarService = Depends(get_calendar_service)):
    """Mark a maintenance visit as cancelled"""
    return service.cancel_task(task_id)


# ============================================================================
# TOUR PLANNING
# ============================================================================


@router.get("/planning/weeks", response_model=list[PlanningWeek])
async def get_planning_weeks(service: CalendarService = Depends(get_calendar_service)):
    """ISO weeks offered in the tour planning dialog"""
    return service.planning_weeks()


@router.post("/planning/stats", response_model=PlanningStats)
async def get_planning_stats(
    data: PlanningRange,
    service: CalendarService = Depends(get_calendar_service),
):
    """Task counts per status for the selected week range"""
    return service.planning_stats(data)


@router.post("/planning/start", status_code=202)
async def start_planning(
    data: PlanningRange,
    service: CalendarService = Depends(get_calendar_service),
):
    return service.start_planning(data)

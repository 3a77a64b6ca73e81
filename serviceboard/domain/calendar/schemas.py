"""Calendar domain schemas - Pydantic models for maintenance planning"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ...shared.formatting import parse_location


class MaintenanceStatus(str, Enum):
    # date set but nobody contacted yet
    UNPLANNED = "unplanned"
    # contacted by mail, no response yet
    NOT_ANSWERED = "not_answered"
    CONTACTED = "contacted"
    PLANNED = "planned"


class SchedulingStatus(str, Enum):
    NOT_CONTACTED = "not_contacted"
    EMAIL_SENT = "email_sent"
    EMAIL_CONFIRMED = "email_confirmed"
    PHONE_CALLED = "phone_called"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class ConfirmationStatus(str, Enum):
    PENDING = "pending"
    TENTATIVE = "tentative"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class CalendarViewRange(str, Enum):
    ONE_WEEK = "1week"
    TWO_WEEKS = "2weeks"
    THREE_WEEKS = "3weeks"
    FOUR_WEEKS = "4weeks"

    @property
    def weeks(self) -> int:
        return int(self.value[0])


class CalendarViewMode(str, Enum):
    COLUMNS = "columns"  # weeks as columns, weekdays as rows
    ROWS = "rows"  # weeks as rows, weekdays as columns


ALL_STATUSES = frozenset(MaintenanceStatus)


class Technician(BaseModel):
    id: str
    name: str
    initials: str
    color: str


class StatusConfig(BaseModel):
    label: str
    dot_color: str


class MaintenanceTask(BaseModel):
    """Maintenance visit shown in the calendar"""

    model_config = ConfigDict(frozen=True)

    id: str
    contact_person: str
    location: str
    phone_number: str = ""
    email: str = ""
    scheduled_date: date
    maintenance_status: MaintenanceStatus = MaintenanceStatus.UNPLANNED
    scheduling_status: SchedulingStatus = SchedulingStatus.NOT_CONTACTED
    confirmation_status: ConfirmationStatus = ConfirmationStatus.PENDING
    technician_id: Optional[str] = None
    technician_name: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("scheduled_date", mode="before")
    @classmethod
    def to_calendar_day(cls, v):
        # Only the local calendar day matters, time of day is dropped
        if isinstance(v, str) and "T" in v:
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        if isinstance(v, datetime):
            if v.tzinfo is not None:
                v = v.astimezone()
            return v.date()
        return v

    @field_validator("technician_id", mode="before")
    @classmethod
    def empty_technician_is_unassigned(cls, v):
        return v or None

    @computed_field
    @property
    def zip_city(self) -> str:
        return parse_location(self.location).zip_city


class AllTechnicians(BaseModel):
    kind: Literal["all"] = "all"

    def includes(self, technician_id: str) -> bool:
        return True


class SpecificTechnicians(BaseModel):
    kind: Literal["specific"] = "specific"
    ids: frozenset[str] = frozenset()

    def includes(self, technician_id: str) -> bool:
        return technician_id in self.ids


TechnicianSelection = Annotated[
    Union[AllTechnicians, SpecificTechnicians], Field(discriminator="kind")
]


class CalendarFilters(BaseModel):
    technicians: TechnicianSelection = Field(default_factory=AllTechnicians)
    include_unassigned: bool = False
    statuses: frozenset[MaintenanceStatus] = ALL_STATUSES


class CalendarConfig(BaseModel):
    """Reference data the grouping engine works with"""

    technicians: list[Technician] = []
    statuses: dict[MaintenanceStatus, StatusConfig] = {}

    def technician(self, technician_id: str) -> Optional[Technician]:
        for tech in self.technicians:
            if tech.id == technician_id:
                return tech
        return None


class CalendarView(BaseModel):
    anchor: date
    view_range: CalendarViewRange = CalendarViewRange.FOUR_WEEKS
    view_mode: CalendarViewMode = CalendarViewMode.COLUMNS


# Grid output


class TechnicianGroup(BaseModel):
    technician_id: str
    technician: Optional[Technician] = None
    tasks: list[MaintenanceTask]


class DayCell(BaseModel):
    day: date
    weekday: int  # 0 = Monday
    weekday_name: str
    label: str
    is_today: bool
    is_weekend: bool
    technician_groups: list[TechnicianGroup]
    unassigned: list[MaintenanceTask]
    total_count: int
    visible_count: int


class WeekBlock(BaseModel):
    week_number: int
    start: date
    days: list[DayCell]
    visible_count: int


class CalendarGrid(BaseModel):
    mode: CalendarViewMode
    today: date
    weeks: list[WeekBlock]
    displayed_weekdays: list[int]
    weekday_totals: list[int]
    total_visible: int


class CalendarGridRequest(BaseModel):
    filters: CalendarFilters = Field(default_factory=CalendarFilters)
    anchor: Optional[date] = None
    view_range: Optional[CalendarViewRange] = None
    view_mode: Optional[CalendarViewMode] = None


class NavigateRequest(BaseModel):
    direction: int = Field(..., ge=-52, le=52)


class CalendarStateResponse(BaseModel):
    today: date
    view: CalendarView
    default_filters: CalendarFilters
    technicians: list[Technician]
    statuses: dict[MaintenanceStatus, StatusConfig]


# Tour planning


class PlanningWeek(BaseModel):
    week_number: int
    year: int
    label: str


class PlanningRange(BaseModel):
    start_week: PlanningWeek
    end_week: PlanningWeek


class PlanningStats(BaseModel):
    total: int
    unplanned: int
    not_answered: int
    contacted: int
    planned: int


class ViewUpdateRequest(BaseModel):
    view_range: Optional[CalendarViewRange] = None
    view_mode: Optional[CalendarViewMode] = None


class FilterToggle(str, Enum):
    TECHNICIAN = "technician"
    SHOW_ALL_TECHNICIANS = "show_all_technicians"
    STATUS = "status"
    ALL_STATUSES = "all_statuses"


class FilterToggleRequest(BaseModel):
    """One click in the technician or status dropdown, applied to the current filters"""

    filters: CalendarFilters = Field(default_factory=CalendarFilters)
    toggle: FilterToggle
    technician_id: Optional[str] = None
    status: Optional[MaintenanceStatus] = None

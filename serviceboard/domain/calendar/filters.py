"""Technician and status filter state transitions for the calendar"""

from .schemas import (
    ALL_STATUSES,
    AllTechnicians,
    CalendarFilters,
    MaintenanceStatus,
    SpecificTechnicians,
    StatusConfig,
    Technician,
    TechnicianSelection,
)

STATUS_LABELS = {
    MaintenanceStatus.UNPLANNED: StatusConfig(label="Ungeplant", dot_color="bg-muted-foreground"),
    MaintenanceStatus.NOT_ANSWERED: StatusConfig(label="Keine Antwort", dot_color="bg-warning"),
    MaintenanceStatus.CONTACTED: StatusConfig(label="Kontaktiert", dot_color="bg-info"),
    MaintenanceStatus.PLANNED: StatusConfig(label="Geplant", dot_color="bg-success"),
}


def default_filters(technicians: list[Technician]) -> CalendarFilters:
    """First technician only, unassigned hidden, every status shown"""
    first = [technicians[0].id] if technicians else []
    return CalendarFilters(
        technicians=SpecificTechnicians(ids=frozenset(first)),
        include_unassigned=False,
        statuses=ALL_STATUSES,
    )


def _selected_ids(selection: TechnicianSelection, technicians: list[Technician]) -> frozenset[str]:
    if isinstance(selection, AllTechnicians):
        return frozenset(t.id for t in technicians)
    return selection.ids


def toggle_technician(
    selection: TechnicianSelection, technician_id: str, technicians: list[Technician]
) -> SpecificTechnicians:
    """Add or remove one technician from the selection"""
    ids = set(_selected_ids(selection, technicians))
    if technician_id in ids:
        ids.remove(technician_id)
    else:
        ids.add(technician_id)
    return SpecificTechnicians(ids=frozenset(ids))


def is_showing_all_technicians(filters: CalendarFilters, technicians: list[Technician]) -> bool:
    selected = _selected_ids(filters.technicians, technicians)
    return filters.include_unassigned and all(t.id in selected for t in technicians)


def toggle_show_all_technicians(
    filters: CalendarFilters, technicians: list[Technician]
) -> CalendarFilters:
    """
    "Show all" switch of the technician dropdown.

    When everything is visible it falls back to the default single-technician
    view, otherwise it selects every technician including unassigned tasks.
    """
    if is_showing_all_technicians(filters, technicians):
        fallback = default_filters(technicians)
        return filters.model_copy(
            update={"technicians": fallback.technicians, "include_unassigned": False}
        )
    return filters.model_copy(
        update={"technicians": AllTechnicians(), "include_unassigned": True}
    )


def toggle_status(
    selected: frozenset[MaintenanceStatus], status: MaintenanceStatus
) -> frozenset[MaintenanceStatus]:
    """Add or remove a status, the last remaining status cannot be removed"""
    if status in selected:
        if len(selected) > 1:
            return selected - {status}
        return selected
    return selected | {status}


def toggle_all_statuses(selected: frozenset[MaintenanceStatus]) -> frozenset[MaintenanceStatus]:
    if selected == ALL_STATUSES:
        return frozenset({MaintenanceStatus.PLANNED})
    return ALL_STATUSES

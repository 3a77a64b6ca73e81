"""Tests for calendar filter state transitions."""

from serviceboard.domain.calendar.filters import (
    default_filters,
    is_showing_all_technicians,
    toggle_all_statuses,
    toggle_show_all_technicians,
    toggle_status,
    toggle_technician,
)
from serviceboard.domain.calendar.schemas import (
    ALL_STATUSES,
    AllTechnicians,
    CalendarFilters,
    MaintenanceStatus,
    SpecificTechnicians,
)


def test_default_filters(technicians):
    filters = default_filters(technicians)
    assert filters.technicians == SpecificTechnicians(ids=frozenset({"t1"}))
    assert filters.include_unassigned is False
    assert filters.statuses == ALL_STATUSES


def test_default_filters_without_technicians():
    filters = default_filters([])
    assert filters.technicians.ids == frozenset()


def test_toggle_technician_adds_and_removes(technicians):
    selection = SpecificTechnicians(ids=frozenset({"t1"}))
    added = toggle_technician(selection, "t2", technicians)
    assert added.ids == {"t1", "t2"}
    removed = toggle_technician(added, "t1", technicians)
    assert removed.ids == {"t2"}


def test_toggle_technician_from_all_deselects_one(technicians):
    result = toggle_technician(AllTechnicians(), "t1", technicians)
    assert result == SpecificTechnicians(ids=frozenset({"t2"}))


def test_toggle_show_all_technicians(technicians):
    filters = default_filters(technicians)
    assert not is_showing_all_technicians(filters, technicians)

    everything = toggle_show_all_technicians(filters, technicians)
    assert isinstance(everything.technicians, AllTechnicians)
    assert everything.include_unassigned is True
    assert is_showing_all_technicians(everything, technicians)

    back = toggle_show_all_technicians(everything, technicians)
    assert back.technicians == SpecificTechnicians(ids=frozenset({"t1"}))
    assert back.include_unassigned is False


def test_explicit_selection_of_everyone_counts_as_all(technicians):
    filters = CalendarFilters(
        technicians=SpecificTechnicians(ids=frozenset({"t1", "t2"})), include_unassigned=True
    )
    assert is_showing_all_technicians(filters, technicians)


def test_toggle_status_keeps_last_status():
    only_planned = frozenset({MaintenanceStatus.PLANNED})
    assert toggle_status(only_planned, MaintenanceStatus.PLANNED) == only_planned
    assert toggle_status(only_planned, MaintenanceStatus.CONTACTED) == {
        MaintenanceStatus.PLANNED,
        MaintenanceStatus.CONTACTED,
    }
    assert MaintenanceStatus.UNPLANNED not in toggle_status(ALL_STATUSES, MaintenanceStatus.UNPLANNED)


def test_toggle_all_statuses():
    assert toggle_all_statuses(ALL_STATUSES) == {MaintenanceStatus.PLANNED}
    assert toggle_all_statuses(frozenset({MaintenanceStatus.CONTACTED})) == ALL_STATUSES


def test_filters_accept_tagged_selection_payload():
    filters = CalendarFilters.model_validate(
        {"technicians": {"kind": "specific", "ids": ["t2"]}, "statuses": ["planned"]}
    )
    assert filters.technicians.includes("t2")
    assert not filters.technicians.includes("t1")
    assert filters.statuses == {MaintenanceStatus.PLANNED}

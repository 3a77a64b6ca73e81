"""Tests for the tour planning helpers."""

from datetime import date

from serviceboard.domain.calendar.planning import available_weeks, planning_stats, start_planning
from serviceboard.domain.calendar.schemas import PlanningWeek

from conftest import TODAY


def test_available_weeks_start_at_current_week():
    weeks = available_weeks(TODAY, 3)
    assert [w.label for w in weeks] == ["KW 11", "KW 12", "KW 13"]
    assert all(w.year == 2024 for w in weeks)


def test_available_weeks_roll_into_next_iso_year():
    weeks = available_weeks(date(2024, 12, 18), 4)
    assert [(w.week_number, w.year) for w in weeks] == [(51, 2024), (52, 2024), (1, 2025), (2, 2025)]
    assert weeks[2].label == "KW 1 (2025)"


def test_planning_stats_counts_by_status(tasks):
    start = PlanningWeek(week_number=11, year=2024, label="KW 11")
    end = PlanningWeek(week_number=12, year=2024, label="KW 12")
    stats = planning_stats(tasks, start, end)

    # m1..m6 fall between 2024-03-11 and 2024-03-24
    assert stats.total == 6
    assert stats.planned == 3
    assert stats.contacted == 1
    assert stats.unplanned == 1
    assert stats.not_answered == 1


def test_planning_stats_single_week(tasks):
    week = PlanningWeek(week_number=12, year=2024, label="KW 12")
    stats = planning_stats(tasks, week, week)
    assert stats.total == 1
    assert stats.planned == 1


def test_start_planning_is_acknowledged_only():
    start = PlanningWeek(week_number=11, year=2024, label="KW 11")
    end = PlanningWeek(week_number=14, year=2024, label="KW 14")
    result = start_planning(start, end)
    assert result["startWeek"] == "KW 11"
    assert result["endWeek"] == "KW 14"

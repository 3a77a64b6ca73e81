"""Tests for the ticket intake panel."""

from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from serviceboard.domain.tickets.schemas import ServiceTicket, TicketPriority
from serviceboard.domain.tickets.service import priority_summary, sort_tickets

from conftest import NOW


def test_sort_by_priority_then_newest(tickets):
    assert [t.id for t in sort_tickets(tickets)] == ["s2", "s4", "s3", "s1"]


def test_priority_summary(tickets):
    summary = priority_summary(tickets)
    assert summary.total == 4
    assert summary.urgent == 2
    assert summary.high == 1


def test_list_tickets_adds_labels(ticket_service):
    response = ticket_service.list_tickets()
    cards = {card.ticket.id: card for card in response.tickets}

    assert cards["s2"].created_label == "Heute"
    assert cards["s4"].created_label == "Gestern"
    assert cards["s3"].created_label == "Vor 2 Tagen"
    assert cards["s1"].created_label == "01.03."
    assert cards["s2"].priority_label == "Dringend"
    assert cards["s1"].priority_label == "Niedrig"
    assert response.summary.total == 4


def test_schedule_ticket_stub(ticket_service):
    result = ticket_service.schedule_ticket("s3")
    assert result["ticketId"] == "s3"

    with pytest.raises(HTTPException) as exc_info:
        ticket_service.schedule_ticket("missing")
    assert exc_info.value.status_code == 404


def test_ticket_accepts_camel_case_and_aware_timestamps():
    ticket = ServiceTicket.model_validate(
        {
            "id": "s9",
            "title": "Test",
            "contactPerson": "Eva Adler",
            "location": "Weg 1, 12345 Ort",
            "priority": "high",
            "createdAt": datetime(2024, 3, 13, 8, 0, tzinfo=timezone.utc),
        }
    )
    assert ticket.priority == TicketPriority.HIGH
    assert ticket.created_at.tzinfo is None
    # Comparable with the naive local clock
    assert ticket.created_at < NOW.replace(year=2025)

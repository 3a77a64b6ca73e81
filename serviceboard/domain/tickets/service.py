"""Ticket service - Ordering and actions for the ticket intake panel"""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from fastapi import HTTPException

from ...shared.formatting import format_relative_date
from .schemas import (
    PRIORITY_LABELS,
    PrioritySummary,
    ServiceTicket,
    TicketCard,
    TicketListResponse,
    TicketPriority,
)

logger = logging.getLogger(__name__)

PRIORITY_ORDER = {
    TicketPriority.URGENT: 0,
    TicketPriority.HIGH: 1,
    TicketPriority.MEDIUM: 2,
    TicketPriority.LOW: 3,
}


def sort_tickets(tickets: Iterable[ServiceTicket]) -> list[ServiceTicket]:
    """Most urgent first, newest first within the same priority"""
    newest_first = sorted(tickets, key=lambda t: t.created_at, reverse=True)
    return sorted(newest_first, key=lambda t: PRIORITY_ORDER[t.priority])


def priority_summary(tickets: Iterable[ServiceTicket]) -> PrioritySummary:
    summary = PrioritySummary()
    for ticket in tickets:
        summary.total += 1
        if ticket.priority == TicketPriority.URGENT:
            summary.urgent += 1
        elif ticket.priority == TicketPriority.HIGH:
            summary.high += 1
    return summary


class TicketService:
    def __init__(self, tickets: Iterable[ServiceTicket], clock: Callable[[], datetime] = datetime.now):
        self._tickets = list(tickets)
        self.clock = clock

    @property
    def tickets(self) -> list[ServiceTicket]:
        return list(self._tickets)

    def get_ticket(self, ticket_id: str) -> ServiceTicket:
        for ticket in self._tickets:
            if ticket.id == ticket_id:
                return ticket
        raise HTTPException(status_code=404, detail="Ticket not found")

    def list_tickets(self, now: Optional[datetime] = None) -> TicketListResponse:
        """Sorted ticket cards with relative creation labels and the priority summary"""
        now = now or self.clock()
        cards = [
            TicketCard(
                ticket=ticket,
                priority_label=PRIORITY_LABELS[ticket.priority],
                created_label=format_relative_date(ticket.created_at, now),
            )
            for ticket in sort_tickets(self._tickets)
        ]
        return TicketListResponse(tickets=cards, summary=priority_summary(self._tickets))

    def schedule_ticket(self, ticket_id: str) -> dict:
        ticket = self.get_ticket(ticket_id)
        logger.info(f"📅 Schedule requested for ticket {ticket.id} ({ticket.title})")
        return {"message": "Ticket scheduling is not available yet", "ticketId": ticket.id}

    def create_ticket(self) -> dict:
        logger.info("🎫 New ticket requested")
        return {"message": "Ticket creation is not available yet"}

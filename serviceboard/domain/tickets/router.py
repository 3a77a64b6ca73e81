"""Ticket router - FastAPI endpoints for the ticket intake panel"""

import logging

from fastapi import APIRouter, Depends, Request

from .schemas import TicketListResponse
from .service import TicketService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["Tickets"])


def get_ticket_service(request: Request) -> TicketService:
    return request.app.state.ticket_service


@router.get("", response_model=TicketListResponse, response_model_by_alias=True)
async def get_tickets(service: TicketService = Depends(get_ticket_service)):
    """Open tickets ordered by priority, with the panel summary"""
    return service.list_tickets()


@router.post("", status_code=202)
async def create_ticket(service: TicketService = Depends(get_ticket_service)):
    return service.create_ticket()


@router.post("/{ticket_id}/schedule", status_code=202)
async def schedule_ticket(ticket_id: str, service: TicketService = Depends(get_ticket_service)):
    """Hand a ticket over to the calendar"""
    return service.schedule_ticket(ticket_id)

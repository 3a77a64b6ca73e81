"""Ticket domain schemas - Pydantic models for service tickets"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


PRIORITY_LABELS = {
    TicketPriority.LOW: "Niedrig",
    TicketPriority.MEDIUM: "Mittel",
    TicketPriority.HIGH: "Hoch",
    TicketPriority.URGENT: "Dringend",
}


class ServiceTicket(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)

    id: str
    title: str
    contact_person: str
    location: str
    phone_number: str = ""
    email: str = ""
    priority: TicketPriority = TicketPriority.MEDIUM
    created_at: datetime
    description: Optional[str] = None

    @field_validator("created_at")
    @classmethod
    def to_local_time(cls, value: datetime) -> datetime:
        # Compared against the naive local clock
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class TicketCard(BaseModel):
    """Ticket as shown in the intake panel"""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    ticket: ServiceTicket
    priority_label: str
    created_label: str


class PrioritySummary(BaseModel):
    total: int = 0
    urgent: int = 0
    high: int = 0


class TicketListResponse(BaseModel):
    tickets: list[TicketCard]
    summary: PrioritySummary

# app/ticket/models.py
import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def new_ticket_id() -> str:
    return uuid.uuid4().hex


class Ticket(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_ticket_id)
    title: str
    description: str = ""
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM

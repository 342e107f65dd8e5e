# app/ticket/schemas.py
from typing import Any

from pydantic import BaseModel, field_validator

from app.ticket.models import TicketPriority, TicketStatus


# Raw form values; status and priority are checked by the services
class TicketForm(BaseModel):
    title: str = ""
    description: str | None = None
    status: str | None = None
    priority: str | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def drop_non_text_priority(cls, value: Any) -> Any:
        # anything that is not text ends up as the default priority
        return value if isinstance(value, str) else None


class TicketOut(BaseModel):
    id: str
    title: str
    description: str
    status: TicketStatus
    priority: TicketPriority

    model_config = {"from_attributes": True}


class TicketStats(BaseModel):
    total: int = 0
    open: int = 0
    in_progress: int = 0
    closed: int = 0

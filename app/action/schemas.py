# app/action/schemas.py
from pydantic import BaseModel

from app.ticket.schemas import TicketOut


class ActionResult(BaseModel):
    success: bool
    message: str = ""
    ticket: TicketOut | None = None
    tickets: list[TicketOut] | None = None

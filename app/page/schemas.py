# app/page/schemas.py
from pydantic import BaseModel

from app.page.services import Page
from app.ticket.schemas import TicketOut, TicketStats


class PageView(BaseModel):
    page: Page
    authenticated: bool
    stats: TicketStats | None = None
    tickets: list[TicketOut] | None = None

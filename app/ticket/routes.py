# app/ticket/routes.py
from fastapi import APIRouter, Depends, Query
from app.core.session import SessionState, get_session
from app.ticket.models import TicketStatus
from app.ticket.schemas import TicketForm, TicketOut, TicketStats
from app.ticket import services as ticket_service


# Runs before FastAPI validates the request body, so anonymous callers get
# a 401 even when the payload is malformed.
def require_login(session: SessionState = Depends(get_session)) -> None:
    ticket_service.require_auth(session)


router = APIRouter(prefix="/tickets", tags=["Tickets"], dependencies=[Depends(require_login)])

# TicketFlowError subclasses raised below are turned into {"detail": ...}
# responses by the handler registered in app.main.


@router.post("", response_model=TicketOut, status_code=201)
def create(ticket: TicketForm, session: SessionState = Depends(get_session)):
    return ticket_service.create_ticket(session, ticket)


@router.get("", response_model=list[TicketOut])
def list_all(
    status: TicketStatus | None = Query(default=None, description="Filter by status"),
    session: SessionState = Depends(get_session),
):
    return ticket_service.get_all_tickets(session, status)


@router.get("/stats", response_model=TicketStats)
def stats(session: SessionState = Depends(get_session)):
    return ticket_service.get_ticket_stats(session)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, session: SessionState = Depends(get_session)):
    return ticket_service.get_ticket(session, ticket_id)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: str, ticket: TicketForm, session: SessionState = Depends(get_session)):
    return ticket_service.update_ticket(session, ticket_id, ticket)


@router.delete("/{ticket_id}", response_model=TicketOut)
def delete(ticket_id: str, session: SessionState = Depends(get_session)):
    return ticket_service.delete_ticket(session, ticket_id)

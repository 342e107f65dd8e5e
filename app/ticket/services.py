# app/ticket/services.py
import logging

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.core.session import SessionState
from app.ticket.models import Ticket, TicketPriority, TicketStatus
from app.ticket.schemas import TicketForm, TicketStats

logger = logging.getLogger(__name__)


def require_auth(session: SessionState) -> None:
    if not session.authenticated:
        logger.warning("Rejected ticket operation on an anonymous session")
        raise AuthorizationError("Unauthorized")


def _validated_fields(form: TicketForm) -> dict:
    if not form.title:
        raise ValidationError("Title is required")

    try:
        status = TicketStatus(form.status) if form.status is not None else TicketStatus.OPEN
    except ValueError:
        raise ValidationError("Invalid status") from None

    # Unknown priorities fall back to the default rather than failing
    try:
        priority = TicketPriority(form.priority) if form.priority else TicketPriority.MEDIUM
    except ValueError:
        priority = TicketPriority.MEDIUM

    return {
        "title": form.title,
        "description": form.description or "",
        "status": status,
        "priority": priority,
    }


def _index_of(session: SessionState, ticket_id: str) -> int:
    for index, ticket in enumerate(session.tickets):
        if ticket.id == ticket_id:
            return index
    raise NotFoundError("Ticket not found")


def get_all_tickets(session: SessionState, status: TicketStatus | None = None) -> list[Ticket]:
    with session.lock:
        require_auth(session)
        tickets = list(session.tickets)
    if status is not None:
        tickets = [t for t in tickets if t.status == status]
    return tickets


def get_ticket(session: SessionState, ticket_id: str) -> Ticket:
    with session.lock:
        require_auth(session)
        return session.tickets[_index_of(session, ticket_id)]


def create_ticket(session: SessionState, form: TicketForm) -> Ticket:
    with session.lock:
        require_auth(session)
        ticket = Ticket(**_validated_fields(form))
        session.tickets.append(ticket)
    logger.info("Created ticket %s", ticket.id)
    return ticket


def update_ticket(session: SessionState, ticket_id: str, form: TicketForm) -> Ticket:
    with session.lock:
        require_auth(session)
        fields = _validated_fields(form)
        index = _index_of(session, ticket_id)
        ticket = Ticket(id=ticket_id, **fields)
        session.tickets[index] = ticket
    logger.info("Updated ticket %s", ticket_id)
    return ticket


def delete_ticket(session: SessionState, ticket_id: str) -> Ticket:
    with session.lock:
        require_auth(session)
        ticket = session.tickets.pop(_index_of(session, ticket_id))
    logger.info("Deleted ticket %s", ticket_id)
    return ticket


def count_by_status(tickets: list[Ticket]) -> TicketStats:
    return TicketStats(
        total=len(tickets),
        open=sum(1 for t in tickets if t.status == TicketStatus.OPEN),
        in_progress=sum(1 for t in tickets if t.status == TicketStatus.IN_PROGRESS),
        closed=sum(1 for t in tickets if t.status == TicketStatus.CLOSED),
    )


def get_ticket_stats(session: SessionState) -> TicketStats:
    """Counts over the session's tickets, recomputed on every call.

    Does not require authentication; callers decide whether to show it.
    """
    with session.lock:
        tickets = list(session.tickets)
    return count_by_status(tickets)

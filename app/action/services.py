# app/action/services.py
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.action.schemas import ActionResult
from app.auth import services as auth_service
from app.auth.schemas import LoginForm, SignupForm
from app.core.errors import TicketFlowError, ValidationError
from app.core.session import SessionState
from app.ticket import services as ticket_service
from app.ticket.schemas import TicketForm, TicketOut

Handler = Callable[[SessionState, dict[str, Any]], ActionResult]


def _parse(model: type[BaseModel], data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except PydanticValidationError:
        raise ValidationError("Invalid request") from None


def _ticket_id(data: dict[str, Any]) -> str:
    ticket_id = data.get("id")
    return ticket_id if isinstance(ticket_id, str) else ""


def _signup(session: SessionState, data: dict[str, Any]) -> ActionResult:
    auth_service.signup(session, _parse(SignupForm, data))
    return ActionResult(success=True, message="Account created successfully!")


def _login(session: SessionState, data: dict[str, Any]) -> ActionResult:
    auth_service.login(session, _parse(LoginForm, data))
    return ActionResult(success=True, message="Login successful!")


def _logout(session: SessionState, data: dict[str, Any]) -> ActionResult:
    auth_service.logout(session)
    return ActionResult(success=True, message="Logged out successfully")


# Ticket actions check auth before looking at the payload at all
def _create_ticket(session: SessionState, data: dict[str, Any]) -> ActionResult:
    ticket_service.require_auth(session)
    ticket = ticket_service.create_ticket(session, _parse(TicketForm, data))
    return ActionResult(
        success=True,
        message="Ticket created successfully!",
        ticket=TicketOut.model_validate(ticket),
    )


def _update_ticket(session: SessionState, data: dict[str, Any]) -> ActionResult:
    ticket_service.require_auth(session)
    ticket = ticket_service.update_ticket(session, _ticket_id(data), _parse(TicketForm, data))
    return ActionResult(
        success=True,
        message="Ticket updated successfully!",
        ticket=TicketOut.model_validate(ticket),
    )


def _delete_ticket(session: SessionState, data: dict[str, Any]) -> ActionResult:
    ticket_service.require_auth(session)
    ticket_service.delete_ticket(session, _ticket_id(data))
    return ActionResult(success=True, message="Ticket deleted successfully!")


def _get_tickets(session: SessionState, data: dict[str, Any]) -> ActionResult:
    tickets = ticket_service.get_all_tickets(session)
    return ActionResult(
        success=True,
        tickets=[TicketOut.model_validate(t) for t in tickets],
    )


ACTIONS: dict[str, Handler] = {
    "signup": _signup,
    "login": _login,
    "logout": _logout,
    "create_ticket": _create_ticket,
    "update_ticket": _update_ticket,
    "delete_ticket": _delete_ticket,
    "get_tickets": _get_tickets,
}


def dispatch(session: SessionState, action: str, data: dict[str, Any]) -> ActionResult:
    """Run one named action; handler errors become a failed result."""
    try:
        return ACTIONS[action](session, data)
    except TicketFlowError as exc:
        return ActionResult(success=False, message=exc.message)

# app/page/routes.py
from fastapi import APIRouter, Depends, Query
from app.core.session import SessionState, get_session
from app.page.schemas import PageView
from app.page.services import Page, resolve_page
from app.ticket import services as ticket_service
from app.ticket.schemas import TicketOut

router = APIRouter(tags=["Pages"])


@router.get("/", response_model=PageView, response_model_exclude_none=True)
def view(
    page: str | None = Query(default=None, description="landing, login, signup, dashboard or tickets"),
    session: SessionState = Depends(get_session),
):
    # One consistent snapshot: a concurrent logout cannot split the view
    with session.lock:
        authenticated = session.authenticated
        tickets = list(session.tickets)

    resolved = resolve_page(page, authenticated)
    result = PageView(page=resolved, authenticated=authenticated)
    if resolved == Page.DASHBOARD:
        result.stats = ticket_service.count_by_status(tickets)
    elif resolved == Page.TICKETS:
        result.tickets = [TicketOut.model_validate(t) for t in tickets]
    return result

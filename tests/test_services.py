# tests/test_services.py
import pytest

from app.auth import services as auth_service
from app.auth.schemas import LoginForm, SignupForm
from app.core.errors import AuthError, AuthorizationError, NotFoundError, ValidationError
from app.ticket import services as ticket_service
from app.ticket.models import TicketPriority, TicketStatus
from app.ticket.schemas import TicketForm


def make(session, title, status="open", priority=None):
    return ticket_service.create_ticket(
        session, TicketForm(title=title, status=status, priority=priority)
    )


def test_signup_stores_hashed_user_and_authenticates(session):
    user = auth_service.signup(session, SignupForm(name="Ann", email="ann@x.com", password="secret1"))

    assert session.authenticated is True
    assert session.user == user
    assert user.password_hash != "secret1"


def test_second_signup_overwrites_user(session):
    auth_service.signup(session, SignupForm(name="Ann", email="ann@x.com", password="secret1"))
    auth_service.signup(session, SignupForm(name="Bob", email="bob@x.com", password="secret2"))

    assert session.user.email == "bob@x.com"
    with pytest.raises(AuthError):
        auth_service.login(session, LoginForm(email="ann@x.com", password="secret1"))


def test_failed_signup_leaves_session_untouched(session):
    with pytest.raises(ValidationError):
        auth_service.signup(session, SignupForm(name="Ann", email="ann@x", password="secret1"))
    assert session.user is None
    assert session.authenticated is False


def test_failed_login_does_not_authenticate(session):
    auth_service.signup(session, SignupForm(name="Ann", email="ann@x.com", password="secret1"))
    auth_service.logout(session)

    with pytest.raises(AuthError) as exc:
        auth_service.login(session, LoginForm(email="ann@x.com", password="nope123"))
    assert exc.value.message == "Invalid email or password"
    assert session.authenticated is False


def test_logout_without_login_succeeds(session):
    auth_service.logout(session)
    assert session.authenticated is False


def test_create_appends_with_fresh_id(auth_session):
    first = make(auth_session, "First")
    second = make(auth_session, "Second")

    assert auth_session.tickets[-1] == second
    assert first.id and second.id
    assert first.id != second.id


def test_create_defaults(auth_session):
    ticket = ticket_service.create_ticket(auth_session, TicketForm(title="Only a title"))
    assert ticket.status == TicketStatus.OPEN
    assert ticket.priority == TicketPriority.MEDIUM
    assert ticket.description == ""


def test_update_changes_only_target_and_keeps_position(auth_session):
    a, b, c = make(auth_session, "A"), make(auth_session, "B"), make(auth_session, "C")

    updated = ticket_service.update_ticket(
        auth_session,
        b.id,
        TicketForm(title="B2", description="more", status="in_progress", priority="high"),
    )

    assert updated.id == b.id
    assert auth_session.tickets == [a, updated, c]
    assert updated.status == TicketStatus.IN_PROGRESS
    assert updated.priority == TicketPriority.HIGH


def test_delete_preserves_order_of_the_rest(auth_session):
    a, b, c = make(auth_session, "A"), make(auth_session, "B"), make(auth_session, "C")

    removed = ticket_service.delete_ticket(auth_session, b.id)

    assert removed == b
    assert auth_session.tickets == [a, c]


def test_delete_missing_leaves_list_unchanged(auth_session):
    a = make(auth_session, "A")
    with pytest.raises(NotFoundError):
        ticket_service.delete_ticket(auth_session, "missing")
    assert auth_session.tickets == [a]


def test_invalid_status_rejected_without_mutation(auth_session):
    a = make(auth_session, "A")
    with pytest.raises(ValidationError, match="Invalid status"):
        ticket_service.update_ticket(auth_session, a.id, TicketForm(title="A", status="done"))
    assert auth_session.tickets == [a]


@pytest.mark.parametrize(
    "call",
    [
        lambda s: ticket_service.create_ticket(s, TicketForm(title="T")),
        lambda s: ticket_service.update_ticket(s, "x", TicketForm(title="T")),
        lambda s: ticket_service.delete_ticket(s, "x"),
        lambda s: ticket_service.get_all_tickets(s),
        lambda s: ticket_service.get_ticket(s, "x"),
    ],
)
def test_ticket_operations_require_auth(session, call):
    with pytest.raises(AuthorizationError):
        call(session)
    assert session.tickets == []


def test_anonymous_update_does_not_touch_existing_tickets(auth_session):
    a = make(auth_session, "A")
    auth_service.logout(auth_session)

    with pytest.raises(AuthorizationError):
        ticket_service.update_ticket(auth_session, a.id, TicketForm(title="hacked"))
    assert auth_session.tickets == [a]


def test_list_is_a_copy(auth_session):
    make(auth_session, "A")
    listed = ticket_service.get_all_tickets(auth_session)
    listed.clear()
    assert len(auth_session.tickets) == 1


def test_stats_recomputed(auth_session):
    a = make(auth_session, "A")
    make(auth_session, "B", status="in_progress")
    assert ticket_service.get_ticket_stats(auth_session).model_dump() == {
        "total": 2, "open": 1, "in_progress": 1, "closed": 0,
    }

    ticket_service.update_ticket(auth_session, a.id, TicketForm(title="A", status="closed"))
    stats = ticket_service.get_ticket_stats(auth_session)
    assert (stats.open, stats.closed) == (0, 1)

# app/page/services.py
from enum import Enum


class Page(str, Enum):
    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    DASHBOARD = "dashboard"
    TICKETS = "tickets"


PROTECTED_PAGES = {Page.DASHBOARD, Page.TICKETS}


def resolve_page(requested: str | None, authenticated: bool) -> Page:
    """Pick the view to show: unknown names land on the landing page and
    protected views send anonymous visitors to login."""
    try:
        page = Page(requested) if requested else Page.LANDING
    except ValueError:
        page = Page.LANDING
    if page in PROTECTED_PAGES and not authenticated:
        return Page.LOGIN
    return page

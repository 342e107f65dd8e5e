# app/auth/services.py
import logging

from email_validator import EmailNotValidError, validate_email

from app.auth.models import User
from app.auth.schemas import LoginForm, SignupForm
from app.core.config import get_settings
from app.core.errors import AuthError, ValidationError
from app.core.security import get_password_hash, verify_password
from app.core.session import SessionState

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def is_valid_email(email: str) -> bool:
    try:
        # Bare addresses only; "Name <addr>" display forms are rejected
        validate_email(email, check_deliverability=False, allow_display_name=False)
    except EmailNotValidError:
        return False
    return True


def signup(session: SessionState, form: SignupForm) -> User:
    if not form.name or not form.email or not form.password:
        raise ValidationError("All fields are required")
    if not is_valid_email(form.email):
        raise ValidationError("Email is invalid")
    min_length = get_settings().PASSWORD_MIN_LENGTH
    if len(form.password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters")

    user = User(
        name=form.name,
        email=form.email,
        password_hash=get_password_hash(form.password),
    )
    with session.lock:
        session.user = user
        session.authenticated = True
    logger.info("Signed up %s", user.email)
    return user


def login(session: SessionState, form: LoginForm) -> User:
    if not form.email or not form.password:
        raise ValidationError("All fields are required")

    with session.lock:
        user = session.user
        if (
            user is None
            or user.email != form.email
            or not verify_password(form.password, user.password_hash)
        ):
            logger.warning("Failed login attempt for %s", form.email)
            raise AuthError(INVALID_CREDENTIALS)
        session.authenticated = True
    logger.info("Logged in %s", user.email)
    return user


def logout(session: SessionState) -> None:
    # Only the auth flag is cleared; the user and tickets stay in the session
    with session.lock:
        session.authenticated = False
    logger.info("Logged out")

# app/auth/routes.py
from fastapi import APIRouter, Depends
from app.auth import services as auth_service
from app.auth.schemas import LoginForm, SignupForm, UserOut
from app.core.errors import AuthorizationError
from app.core.session import SessionState, get_session

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", response_model=UserOut, status_code=201)
def signup(form: SignupForm, session: SessionState = Depends(get_session)):
    return auth_service.signup(session, form)


@router.post("/login", response_model=UserOut)
def login(form: LoginForm, session: SessionState = Depends(get_session)):
    return auth_service.login(session, form)


@router.post("/logout")
def logout(session: SessionState = Depends(get_session)):
    auth_service.logout(session)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserOut)
def me(session: SessionState = Depends(get_session)):
    if not session.authenticated or session.user is None:
        raise AuthorizationError("Unauthorized")
    return session.user

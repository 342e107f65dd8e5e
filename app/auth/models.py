# app/auth/models.py
from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """The one account a session may hold. Replaced wholesale on signup."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password_hash: str

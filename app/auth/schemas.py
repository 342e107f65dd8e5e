# app/auth/schemas.py
from pydantic import BaseModel


# Missing form fields arrive as "" so the services can report them uniformly
class SignupForm(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""


class LoginForm(BaseModel):
    email: str = ""
    password: str = ""


class UserOut(BaseModel):
    name: str
    email: str

    model_config = {"from_attributes": True}

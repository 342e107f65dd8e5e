# app/core/security.py
from passlib.context import CryptContext

from app.core.config import get_settings

settings = get_settings()

# bcrypt_sha256 pre-hashes the secret so bytes past bcrypt's 72-byte limit still count
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

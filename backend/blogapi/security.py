"""Password hashing and the credential issuers applied to seeded accounts."""

from typing import Optional, Protocol

from passlib.context import CryptContext

from .models import User


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Never produced by bcrypt, so verify_password always rejects it
PLACEHOLDER_HASH = "!"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password or hashed_password == PLACEHOLDER_HASH:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class CredentialIssuer(Protocol):
    def issue(self, user: User) -> None:
        ...


class NoCredentials:
    """Leave ``password_hash`` empty; the account cannot log in."""

    def issue(self, user: User) -> None:
        user.password_hash = None


class PlaceholderCredentials:
    """Store a fixed marker that no password ever matches."""

    def issue(self, user: User) -> None:
        user.password_hash = PLACEHOLDER_HASH


class HashedCredentials:
    def __init__(self, password: str) -> None:
        if not password:
            raise ValueError("password must not be empty")
        self.password = password

    def issue(self, user: User) -> None:
        user.password_hash = get_password_hash(self.password)


def credentials_from_settings(settings) -> CredentialIssuer:
    if settings.demo_password:
        return HashedCredentials(settings.demo_password)
    return NoCredentials()

"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password

from .record_activity import record_activity

INVALID_CREDENTIALS_MESSAGE = "Felaktigt användarnamn eller lösenord"


def authenticate_user(session: Session, name: str, password: str) -> User:
    """Return the user called ``name`` if ``password`` matches."""

    user = UserRepository(session).get_by_name(name.strip())
    if user is None or not verify_password(password, user.password):
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    return user


def login_user(
    session: Session, publisher: EventPublisher, *, name: str, password: str
) -> User:
    """Authenticate the user and record the login as activity."""

    user = authenticate_user(session, name, password)
    return record_activity(session, publisher, user.id)

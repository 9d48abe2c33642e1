"""Create the default warehouse accounts on first start."""

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import ROLE_ADMIN, ROLE_USER, User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    {"name": "Anna Andersson", "role": ROLE_USER, "email": "anna.a@example.com", "is_active": True},
    {"name": "Erik Eriksson", "role": ROLE_USER, "email": "erik.e@example.com", "is_active": True},
    {"name": "Maria Nilsson", "role": ROLE_ADMIN, "email": "maria.n@example.com", "is_active": False},
    {"name": "Admin", "role": ROLE_ADMIN, "email": "admin@example.com", "is_active": True},
)


def seed_default_users(session: Session) -> list[User]:
    """Insert the default users that do not exist yet and return them.

    Runs before any client can connect, so no change events are sent.
    """

    settings = get_settings()
    repository = UserRepository(session)
    created = []
    for data in DEFAULT_USERS:
        if repository.get_by_name(data["name"]):
            continue
        user = repository.create(
            User(
                id=None,
                password=get_password_hash(settings.default_user_password),
                last_active=None,
                **data,
            )
        )
        logger.info("Created default user %s", user.name)
        created.append(user)
    return created

"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, WebSocket, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.realtime import ChangeEventBroadcaster, ChangeEventPublisher
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login")

_CREDENTIALS_EXCEPTION_DETAIL = "Ogiltiga inloggningsuppgifter"


def get_broadcaster(request: Request) -> ChangeEventBroadcaster:
    """Return the broadcaster owned by the running application."""

    return request.app.state.broadcaster


def get_websocket_broadcaster(websocket: WebSocket) -> ChangeEventBroadcaster:
    return websocket.app.state.broadcaster


def get_event_publisher(
    broadcaster: ChangeEventBroadcaster = Depends(get_broadcaster),
) -> ChangeEventPublisher:
    return ChangeEventPublisher(broadcaster)


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_CREDENTIALS_EXCEPTION_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    user_id = payload.get("sub")
    if not isinstance(user_id, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_CREDENTIALS_EXCEPTION_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = UserRepository(db).get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Användaren hittades inte",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)

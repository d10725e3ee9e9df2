"""Request dependencies shared by the API routers."""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.errors import UnauthorizedError
from taskboard.models import Session as LoginSession
from taskboard.models import User

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _is_expired(expires: datetime) -> bool:
    # SQLite hands back naive datetimes; stored values are always UTC.
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return expires <= datetime.now(timezone.utc)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer session token to its user."""
    if credentials is None:
        raise UnauthorizedError()

    login_session = db.execute(
        select(LoginSession).where(LoginSession.session_token == credentials.credentials)
    ).scalar_one_or_none()
    if login_session is None:
        raise UnauthorizedError("Invalid session")
    if _is_expired(login_session.expires):
        logger.debug("Rejected expired session for user_id=%s", login_session.user_id)
        raise UnauthorizedError("Session expired")

    return login_session.user

"""
Shared API dependencies.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from app.database import get_db
from app.config import settings
from app.core.exceptions import InvalidToken, MissingToken
from app.services.auth_service import auth_service

session_token_header = APIKeyHeader(name=settings.AUTH_HEADER, auto_error=False)


async def get_session_token(token: Optional[str] = Depends(session_token_header)) -> str:
    """
    Require the session token header.
    """
    if not token:
        raise MissingToken()
    return token


async def get_current_user_id(
    db: Session = Depends(get_db), token: str = Depends(get_session_token)
) -> int:
    """
    Validate session token and return the id of the logged in user.
    """
    return auth_service.resolve_token(db, token)


async def get_optional_user_id(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(session_token_header),
) -> Optional[int]:
    """
    Like get_current_user_id, but anonymous callers (and bad tokens) get None.
    """
    if not token:
        return None
    try:
        return auth_service.resolve_token(db, token)
    except InvalidToken:
        return None

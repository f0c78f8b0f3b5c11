"""
User account and session endpoints.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import InvalidCredentials, UserNotFound
from app.core.rate_limit import limiter
from app.database import get_db
from app.dependencies import get_current_user_id, get_session_token
from app.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserCreate,
    UserCreated,
    UserProfile,
)
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/users", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
async def create_account(user_in: UserCreate, db: Session = Depends(get_db)) -> Any:
    """
    Register a new user.
    """
    user_id = auth_service.register(
        db,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email,
        password=user_in.password,
    )
    return {"user_id": user_id}


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request, credentials: LoginRequest, db: Session = Depends(get_db)
) -> Any:
    """
    Log in with email and password. An existing session token is reused.
    """
    try:
        user_id = auth_service.authenticate(
            db, email=credentials.email, password=credentials.password
        )
    except (UserNotFound, InvalidCredentials) as e:
        logger.info(f"Failed login attempt: {type(e).__name__}")
        raise InvalidCredentials()

    token = auth_service.issue_or_reuse_token(db, user_id)
    return {"user_id": user_id, "session_token": token}


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: str = Depends(get_session_token),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Any:
    """
    Invalidate the caller's session token.
    """
    auth_service.revoke_token(db, token)
    logger.info(f"User {user_id} logged out")
    return {"message": "Logged out"}


@router.get("/users/{user_id}", response_model=UserProfile)
async def get_user_details(user_id: int, db: Session = Depends(get_db)) -> Any:
    """
    Public profile with the user's selling, bidding_on and auctions_ended lists.
    """
    return auth_service.get_user_profile(db, user_id)

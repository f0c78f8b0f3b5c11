"""
Authentication Service.

Credential store for users: registration, password checks and the single
session token each user may hold.
"""

import logging
from typing import Optional, Dict, Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core import clock, security
from app.core.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    UserNotFound,
    ValidationError,
)
from app.models.bid import Bid
from app.models.item import Item
from app.models.user import User

logger = logging.getLogger(__name__)


def _item_brief(item: Item, creator: User) -> Dict[str, Any]:
    return {
        "item_id": item.id,
        "name": item.name,
        "description": item.description,
        "end_date": item.end_date,
        "creator_id": item.creator_id,
        "first_name": creator.first_name,
        "last_name": creator.last_name,
    }


class AuthService:
    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get a user by email."""
        return db.query(User).filter(User.email == email).first()

    def get_user_by_id(self, db: Session, user_id: int) -> Optional[User]:
        """Get a user by id."""
        return db.query(User).filter(User.id == user_id).first()

    def register(
        self, db: Session, first_name: str, last_name: str, email: str, password: str
    ) -> int:
        """Create a new user and return its id."""
        if self.get_user_by_email(db, email):
            raise DuplicateEmail()

        salt = security.generate_salt()
        try:
            hashed_password = security.hash_password(password, salt)
        except ValueError as e:
            raise ValidationError(f"Password could not be hashed: {e}")

        db_user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=hashed_password,
            salt=salt,
        )
        db.add(db_user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration with the same email
            db.rollback()
            raise DuplicateEmail()
        db.refresh(db_user)
        logger.info(f"Registered user {db_user.id}")
        return db_user.id

    def authenticate(self, db: Session, email: str, password: str) -> int:
        """
        Check an email/password pair and return the user id.

        Raises UserNotFound for an unknown email and InvalidCredentials for a
        wrong password; callers decide how much of that to reveal.
        """
        user = self.get_user_by_email(db, email)
        if not user:
            raise UserNotFound()
        if not security.verify_password(password, user.salt, user.password):
            raise InvalidCredentials()
        return user.id

    def issue_or_reuse_token(self, db: Session, user_id: int) -> str:
        """Return the user's active token, creating one if they have none."""
        user = self.get_user_by_id(db, user_id)
        if not user:
            raise UserNotFound()
        if user.session_token:
            return user.session_token

        user.session_token = security.generate_session_token()
        db.commit()
        logger.info(f"Issued session token for user {user_id}")
        return user.session_token

    def resolve_token(self, db: Session, token: Optional[str]) -> int:
        """Map a session token back to its user id."""
        if not token:
            raise InvalidToken()
        user_id = db.query(User.id).filter(User.session_token == token).scalar()
        if user_id is None:
            raise InvalidToken()
        return user_id

    def revoke_token(self, db: Session, token: str) -> None:
        """Clear a session token. Unknown tokens are ignored."""
        if not token:
            return
        updated = (
            db.query(User)
            .filter(User.session_token == token)
            .update({User.session_token: None}, synchronize_session=False)
        )
        db.commit()
        if updated:
            logger.info("Session token revoked")

    def get_user_profile(self, db: Session, user_id: int) -> Dict[str, Any]:
        """
        User details plus their active listings, ended listings and the items
        they have bid on.
        """
        user = self.get_user_by_id(db, user_id)
        if not user:
            raise UserNotFound()

        now = clock.now_ms()
        own_items = db.query(Item).filter(Item.creator_id == user_id)

        selling = (
            own_items.filter(Item.end_date > now)
            .order_by(Item.start_date.desc(), Item.id.desc())
            .all()
        )
        ended = (
            own_items.filter(Item.end_date <= now)
            .order_by(Item.end_date.desc(), Item.id.desc())
            .all()
        )

        last_bid = (
            db.query(Bid.item_id, func.max(Bid.timestamp).label("last_bid"))
            .filter(Bid.user_id == user_id)
            .group_by(Bid.item_id)
            .subquery()
        )
        bidding_on = (
            db.query(Item, User)
            .join(last_bid, last_bid.c.item_id == Item.id)
            .join(User, Item.creator_id == User.id)
            .order_by(last_bid.c.last_bid.desc(), Item.id.desc())
            .all()
        )

        return {
            "user_id": user.id,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "selling": [_item_brief(item, user) for item in selling],
            "bidding_on": [_item_brief(item, creator) for item, creator in bidding_on],
            "auctions_ended": [_item_brief(item, user) for item in ended],
        }


auth_service = AuthService()

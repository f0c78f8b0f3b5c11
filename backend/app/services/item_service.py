"""
Auction item store and search.

Item status (open, ended, bid upon) is classified at query time from the
end date and the bid ledger; nothing about it is persisted.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.core import clock
from app.core.exceptions import AuthenticationRequired, ValidationError
from app.models.bid import Bid
from app.models.item import Item
from app.models.user import User
from app.schemas import SearchStatus
from app.services.bid_ledger import bid_ledger

logger = logging.getLogger(__name__)


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _item_summary(item: Item, creator: User) -> Dict[str, Any]:
    return {
        "item_id": item.id,
        "name": item.name,
        "description": item.description,
        "starting_bid": item.starting_bid,
        "start_date": item.start_date,
        "end_date": item.end_date,
        "creator_id": item.creator_id,
        "first_name": creator.first_name,
        "last_name": creator.last_name,
    }


class ItemService:
    def create_item(
        self,
        db: Session,
        creator_id: int,
        name: str,
        description: str,
        starting_bid: float,
        end_date: int,
    ) -> int:
        """Create an item whose auction starts now and return its id."""
        now = clock.now_ms()
        if starting_bid is None or starting_bid <= 0:
            raise ValidationError("Starting bid must be a positive number")
        if end_date <= now:
            raise ValidationError("End date must be in the future")

        item = Item(
            name=name,
            description=description,
            starting_bid=starting_bid,
            start_date=now,
            end_date=end_date,
            creator_id=creator_id,
        )
        db.add(item)
        db.commit()
        db.refresh(item)
        logger.info(f"User {creator_id} listed item {item.id} ending at {end_date}")
        return item.id

    def get_creator(self, db: Session, item_id: int) -> Optional[int]:
        """Id of the user selling the item, or None if there is no such item."""
        return db.query(Item.creator_id).filter(Item.id == item_id).scalar()

    def exists(self, db: Session, item_id: int) -> bool:
        return self.get_creator(db, item_id) is not None

    def get_item(self, db: Session, item_id: int) -> Optional[Dict[str, Any]]:
        """Item details with the derived current bid and current bid holder."""
        row = (
            db.query(Item, User)
            .join(User, Item.creator_id == User.id)
            .filter(Item.id == item_id)
            .first()
        )
        if row is None:
            return None
        item, creator = row

        result = _item_summary(item, creator)
        result["current_bid"] = bid_ledger.current_bid(db, item_id)
        result["current_bid_holder"] = None
        top = bid_ledger.highest_bid(db, item_id)
        if top is not None:
            result["current_bid_holder"] = {
                "user_id": top.bidder.id,
                "first_name": top.bidder.first_name,
                "last_name": top.bidder.last_name,
            }
        return result

    def search(
        self,
        db: Session,
        query_text: Optional[str] = None,
        status: Optional[SearchStatus] = None,
        user_id: Optional[int] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Search items by text and status, soonest-ending first.

        Args:
            query_text: Case-insensitive substring matched against name or description
            status: OPEN / ARCHIVE (requester's own listings, running / ended),
                    BID (items the requester bid on), or None for all running auctions
            user_id: Requesting user, required when status is given
            limit: Page size
            offset: Number of items to skip
        """
        if status is not None and user_id is None:
            raise AuthenticationRequired()

        now = clock.now_ms()
        query = db.query(Item, User).join(User, Item.creator_id == User.id)

        if query_text:
            pattern = f"%{_escape_like(query_text)}%"
            query = query.filter(
                or_(
                    Item.name.ilike(pattern, escape="\\"),
                    Item.description.ilike(pattern, escape="\\"),
                )
            )

        if status == SearchStatus.OPEN:
            query = query.filter(Item.creator_id == user_id, Item.end_date > now)
        elif status == SearchStatus.ARCHIVE:
            query = query.filter(Item.creator_id == user_id, Item.end_date <= now)
        elif status == SearchStatus.BID:
            bid_items = select(Bid.item_id).where(Bid.user_id == user_id)
            query = query.filter(Item.id.in_(bid_items))
        else:
            query = query.filter(Item.end_date > now)

        rows = (
            query.order_by(Item.end_date.asc(), Item.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return [_item_summary(item, creator) for item, creator in rows]


item_service = ItemService()

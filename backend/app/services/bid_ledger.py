"""
Bid ledger: append-only bid rows and the queries derived from them.

The current bid of an item is never stored; it is the highest bid amount on
record, never lower than the item's starting bid.
"""

import logging
from typing import List, Dict, Any, Optional

from sqlalchemy import Float, Integer, BigInteger, case, func, insert, literal, select
from sqlalchemy.orm import Session

from app.models.bid import Bid
from app.models.item import Item
from app.models.user import User

logger = logging.getLogger(__name__)


def current_bid_expr(item_id: int):
    """SQL expression for the larger of MAX(bid amount) and starting_bid."""
    highest = (
        select(func.max(Bid.amount)).where(Bid.item_id == item_id).correlate(None).scalar_subquery()
    )
    starting = select(Item.starting_bid).where(Item.id == item_id).correlate(None).scalar_subquery()
    # NULL > starting is NULL, so an item without bids falls to the else branch
    return case((highest > starting, highest), else_=starting)


def _bid_record(bid: Bid, bidder: User) -> Dict[str, Any]:
    return {
        "item_id": bid.item_id,
        "amount": bid.amount,
        "timestamp": bid.timestamp,
        "user_id": bid.user_id,
        "first_name": bidder.first_name,
        "last_name": bidder.last_name,
    }


class BidLedger:
    def current_bid(self, db: Session, item_id: int) -> Optional[float]:
        """Highest bid for the item, floored at its starting bid. None for unknown items."""
        return db.execute(select(current_bid_expr(item_id))).scalar()

    def highest_bid(self, db: Session, item_id: int) -> Optional[Bid]:
        """The bid row currently holding the item, if any."""
        return (
            db.query(Bid)
            .filter(Bid.item_id == item_id)
            .order_by(Bid.amount.desc(), Bid.id.asc())
            .first()
        )

    def bid_history(self, db: Session, item_id: int) -> List[Dict[str, Any]]:
        """All bids on an item, most recent first."""
        rows = (
            db.query(Bid, User)
            .join(User, Bid.user_id == User.id)
            .filter(Bid.item_id == item_id)
            .order_by(Bid.timestamp.desc(), Bid.id.desc())
            .all()
        )
        return [_bid_record(bid, bidder) for bid, bidder in rows]

    def append(
        self, db: Session, item_id: int, bidder_id: int, amount: float, timestamp: int
    ) -> None:
        """Store a bid as given. No business rules are checked here."""
        db.add(Bid(item_id=item_id, user_id=bidder_id, amount=amount, timestamp=timestamp))
        db.commit()

    def append_if_higher(
        self, db: Session, item_id: int, bidder_id: int, amount: float, timestamp: int
    ) -> bool:
        """
        Store a bid only if it beats the current bid at write time.

        Runs as a single INSERT ... SELECT ... WHERE statement so a competing
        bid committed after the caller's read cannot be undercut.

        Returns:
            True if the bid row was written.
        """
        candidate = select(
            literal(item_id, Integer),
            literal(bidder_id, Integer),
            literal(amount, Float),
            literal(timestamp, BigInteger),
        ).where(literal(amount, Float) > current_bid_expr(item_id))

        result = db.execute(
            insert(Bid).from_select(["item_id", "user_id", "amount", "timestamp"], candidate)
        )
        db.commit()
        return result.rowcount == 1


bid_ledger = BidLedger()

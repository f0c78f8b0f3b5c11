"""
Bidding engine: validates a bid against the live item and records it.
"""

import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.core import clock
from app.core.exceptions import BidTooLow, ItemNotFound, SellerCannotBid
from app.services.bid_ledger import bid_ledger
from app.services.item_service import item_service

logger = logging.getLogger(__name__)


class BiddingService:
    def place_bid(
        self, db: Session, item_id: int, bidder_id: int, amount: float
    ) -> Dict[str, Any]:
        """
        Place a bid on an item.

        Checks run in order and the first failure wins; nothing is written
        unless all of them pass:
        1. the item exists,
        2. the bidder is not the seller,
        3. the amount is strictly greater than the current bid.
        """
        creator_id = item_service.get_creator(db, item_id)
        if creator_id is None:
            raise ItemNotFound()

        if creator_id == bidder_id:
            logger.warning(f"User {bidder_id} tried to bid on own item {item_id}")
            raise SellerCannotBid()

        current = bid_ledger.current_bid(db, item_id)
        if amount <= current:
            logger.info(f"Rejected bid {amount} on item {item_id}: current bid is {current}")
            raise BidTooLow()

        timestamp = clock.now_ms()
        if not bid_ledger.append_if_higher(db, item_id, bidder_id, amount, timestamp):
            # A higher bid was committed between the read above and this write
            logger.info(f"Rejected bid {amount} on item {item_id}: outbid concurrently")
            raise BidTooLow()

        logger.info(f"User {bidder_id} bid {amount} on item {item_id}")
        return {
            "item_id": item_id,
            "user_id": bidder_id,
            "amount": amount,
            "timestamp": timestamp,
        }


bidding_service = BiddingService()

"""
Auction item, bidding and search endpoints.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import ItemNotFound
from app.database import get_db
from app.dependencies import get_current_user_id, get_optional_user_id
from app.schemas import (
    BidCreate,
    BidRecord,
    ItemCreate,
    ItemCreated,
    ItemDetail,
    ItemSummary,
    MessageResponse,
    SearchStatus,
)
from app.services.bid_ledger import bid_ledger
from app.services.bidding_service import bidding_service
from app.services.item_service import item_service

router = APIRouter()


@router.post("/item", response_model=ItemCreated, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_in: ItemCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Any:
    """Put a new item up for auction."""
    item_id = item_service.create_item(
        db,
        creator_id=user_id,
        name=item_in.name,
        description=item_in.description,
        starting_bid=item_in.starting_bid,
        end_date=item_in.end_date,
    )
    return {"item_id": item_id}


@router.get("/item/{item_id}", response_model=ItemDetail)
async def get_item(item_id: int, db: Session = Depends(get_db)) -> Any:
    """Item details including the current bid."""
    item = item_service.get_item(db, item_id)
    if item is None:
        raise ItemNotFound()
    return item


@router.post(
    "/item/{item_id}/bid",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def place_bid(
    item_id: int,
    bid_in: BidCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Any:
    """Bid on an item. Sellers cannot bid and bids must beat the current bid."""
    bidding_service.place_bid(db, item_id=item_id, bidder_id=user_id, amount=bid_in.amount)
    return {"message": "Bid received"}


@router.get("/item/{item_id}/bid", response_model=List[BidRecord])
async def get_bids(item_id: int, db: Session = Depends(get_db)) -> Any:
    """Bid history for an item, newest first."""
    if not item_service.exists(db, item_id):
        raise ItemNotFound()
    return bid_ledger.bid_history(db, item_id)


@router.get("/search", response_model=List[ItemSummary])
async def search_items(
    q: Optional[str] = None,
    status: Optional[SearchStatus] = None,
    limit: int = Query(settings.SEARCH_DEFAULT_LIMIT, ge=1, le=settings.SEARCH_MAX_LIMIT),
    offset: int = Query(0, ge=0),
    user_id: Optional[int] = Depends(get_optional_user_id),
    db: Session = Depends(get_db),
) -> Any:
    """
    Search auctions. Without a status only running auctions are listed;
    OPEN, BID and ARCHIVE are relative to the logged in user.
    """
    return item_service.search(
        db, query_text=q, status=status, user_id=user_id, limit=limit, offset=offset
    )

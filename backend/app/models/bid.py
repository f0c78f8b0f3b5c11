"""
Bid database model. Rows are append-only.
"""

from sqlalchemy import Column, Integer, Float, BigInteger, ForeignKey, Index
from sqlalchemy.orm import relationship

from app.database import Base


class Bid(Base):
    """A single bid on an item."""

    __tablename__ = "bids"
    __table_args__ = (
        Index("idx_bid_item_amount", "item_id", "amount"),
        Index("idx_bid_user", "user_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    amount = Column(Float, nullable=False)
    timestamp = Column(BigInteger, nullable=False)

    # Relationships
    item = relationship("Item", back_populates="bids")
    bidder = relationship("User", back_populates="bids")

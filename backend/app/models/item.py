"""
Auction item database model.

Current bid and bid holder are not stored here, they are derived from the
bids table on read.
"""

from sqlalchemy import Column, Integer, String, Text, Float, BigInteger, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from app.database import Base


class Item(Base):
    """An item listed for a timed auction. Dates are unix milliseconds."""

    __tablename__ = "items"
    __table_args__ = (
        Index("idx_item_creator_end", "creator_id", "end_date"),
        CheckConstraint("starting_bid > 0", name="ck_item_starting_bid_positive"),
        CheckConstraint("end_date > start_date", name="ck_item_window"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    starting_bid = Column(Float, nullable=False)
    start_date = Column(BigInteger, nullable=False)
    end_date = Column(BigInteger, nullable=False, index=True)
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    creator = relationship("User", back_populates="items")
    bids = relationship("Bid", back_populates="item")
    questions = relationship("Question", back_populates="item")

"""
Database models for the Auction Marketplace API.

All SQLAlchemy models are imported here for Alembic migrations.
"""

from app.models.user import User
from app.models.item import Item
from app.models.bid import Bid
from app.models.question import Question

__all__ = [
    "User",
    "Item",
    "Bid",
    "Question",
]

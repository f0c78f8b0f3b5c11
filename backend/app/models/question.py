"""
Question database model.
"""

from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base


class Question(Base):
    """Question asked about an item; answer is filled in by the item's seller."""

    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, index=True)
    asked_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=True)

    # Relationships
    item = relationship("Item", back_populates="questions")
    asker = relationship("User")

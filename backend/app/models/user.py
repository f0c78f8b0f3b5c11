"""
User database model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class User(Base):
    """Registered user with a salted password hash and at most one session token."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash, never plaintext
    salt = Column(String, nullable=False)
    session_token = Column(String, unique=True, index=True, nullable=True)

    # Relationships
    items = relationship("Item", back_populates="creator")
    bids = relationship("Bid", back_populates="bidder")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"

import re
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, EmailStr, field_validator

from app.config import settings
from app.core import clock


class SearchStatus(str, Enum):
    OPEN = "OPEN"
    BID = "BID"
    ARCHIVE = "ARCHIVE"


# --- Shared ---
class StrictBody(BaseModel):
    """Request bodies reject unknown fields."""

    class Config:
        extra = "forbid"


class MessageResponse(BaseModel):
    message: str


class UserSummary(BaseModel):
    user_id: int
    first_name: str
    last_name: str


# --- Users / Auth ---
PASSWORD_RULES = [
    (re.compile(r"[A-Z]"), "an uppercase letter"),
    (re.compile(r"[a-z]"), "a lowercase letter"),
    (re.compile(r"[0-9]"), "a number"),
    (re.compile(r"[^A-Za-z0-9]"), "a special character"),
]


class UserCreate(StrictBody):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=settings.PASSWORD_MIN_LENGTH,
        max_length=settings.PASSWORD_MAX_LENGTH,
    )

    @field_validator("password")
    @classmethod
    def check_complexity(cls, value: str) -> str:
        for pattern, label in PASSWORD_RULES:
            if not pattern.search(value):
                raise ValueError(f"Password must contain {label}")
        return value


class UserCreated(BaseModel):
    user_id: int


class LoginRequest(StrictBody):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    user_id: int
    session_token: str


class ItemBrief(BaseModel):
    item_id: int
    name: str
    description: str
    end_date: int
    creator_id: int
    first_name: str
    last_name: str


class UserProfile(UserSummary):
    selling: List[ItemBrief] = []
    bidding_on: List[ItemBrief] = []
    auctions_ended: List[ItemBrief] = []


# --- Items ---
class ItemCreate(StrictBody):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    starting_bid: float = Field(..., gt=0, allow_inf_nan=False)
    end_date: int = Field(..., description="Unix timestamp in milliseconds")

    @field_validator("end_date")
    @classmethod
    def end_date_in_future(cls, value: int) -> int:
        if value <= clock.now_ms():
            raise ValueError("End date must be in the future")
        return value


class ItemCreated(BaseModel):
    item_id: int


class ItemSummary(BaseModel):
    item_id: int
    name: str
    description: str
    starting_bid: float
    start_date: int
    end_date: int
    creator_id: int
    first_name: str
    last_name: str


class ItemDetail(ItemSummary):
    current_bid: float
    current_bid_holder: Optional[UserSummary] = None


# --- Bids ---
class BidCreate(StrictBody):
    amount: float = Field(..., gt=0, allow_inf_nan=False)


class BidRecord(BaseModel):
    item_id: int
    amount: float
    timestamp: int
    user_id: int
    first_name: str
    last_name: str


# --- Questions ---
class QuestionCreate(StrictBody):
    question_text: str = Field(..., min_length=1)


class AnswerCreate(StrictBody):
    answer_text: str = Field(..., min_length=1)


class QuestionCreated(BaseModel):
    question_id: int


class QuestionRecord(BaseModel):
    question_id: int
    question_text: str
    answer_text: Optional[str] = None
    user_id: int
    first_name: str
    last_name: str

"""
Question and answer endpoints.
"""

from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas import (
    AnswerCreate,
    MessageResponse,
    QuestionCreate,
    QuestionCreated,
    QuestionRecord,
)
from app.services.question_service import question_service

router = APIRouter()


@router.get("/item/{item_id}/question", response_model=List[QuestionRecord])
async def get_questions(item_id: int, db: Session = Depends(get_db)) -> Any:
    """Questions asked about an item, newest first."""
    return question_service.list_by_item(db, item_id)


@router.post("/item/{item_id}/question", response_model=QuestionCreated)
async def ask_question(
    item_id: int,
    question_in: QuestionCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Any:
    """Ask the seller a question about their item."""
    question_id = question_service.ask(db, item_id, user_id, question_in.question_text)
    return {"question_id": question_id}


@router.post("/question/{question_id}", response_model=MessageResponse)
async def answer_question(
    question_id: int,
    answer_in: AnswerCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Any:
    """Answer a question on one of your own items."""
    question_service.answer(db, question_id, user_id, answer_in.answer_text)
    return {"message": "Answer submitted"}

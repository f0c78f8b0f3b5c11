"""
Questions and answers on auction items.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.core.exceptions import ItemNotFound, NotItemSeller, QuestionNotFound, SellerCannotAsk
from app.models.item import Item
from app.models.question import Question
from app.models.user import User
from app.services.item_service import item_service

logger = logging.getLogger(__name__)


class QuestionService:
    def ask(self, db: Session, item_id: int, asker_id: int, text: str) -> int:
        """Ask a question about someone else's item."""
        creator_id = item_service.get_creator(db, item_id)
        if creator_id is None:
            raise ItemNotFound()
        if creator_id == asker_id:
            raise SellerCannotAsk()

        question = Question(item_id=item_id, asked_by=asker_id, question=text)
        db.add(question)
        db.commit()
        db.refresh(question)
        logger.info(f"User {asker_id} asked question {question.id} on item {item_id}")
        return question.id

    def answer(self, db: Session, question_id: int, answerer_id: int, text: str) -> None:
        """Answer a question on one of your items. Re-answering overwrites."""
        row = (
            db.query(Question, Item.creator_id)
            .join(Item, Question.item_id == Item.id)
            .filter(Question.id == question_id)
            .first()
        )
        if row is None:
            raise QuestionNotFound()
        question, creator_id = row
        if creator_id != answerer_id:
            raise NotItemSeller()

        question.answer = text
        db.commit()
        logger.info(f"Question {question_id} answered")

    def list_by_item(self, db: Session, item_id: int) -> List[Dict[str, Any]]:
        """Questions for an item, newest first."""
        if not item_service.exists(db, item_id):
            raise ItemNotFound()

        rows = (
            db.query(Question, User)
            .join(User, Question.asked_by == User.id)
            .filter(Question.item_id == item_id)
            .order_by(Question.id.desc())
            .all()
        )
        return [
            {
                "question_id": question.id,
                "question_text": question.question,
                "answer_text": question.answer,
                "user_id": asker.id,
                "first_name": asker.first_name,
                "last_name": asker.last_name,
            }
            for question, asker in rows
        ]


question_service = QuestionService()

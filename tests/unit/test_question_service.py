"""
Tests for questions and answers on items
"""
import pytest

from app.core.exceptions import ItemNotFound, NotItemSeller, QuestionNotFound, SellerCannotAsk
from app.services.question_service import question_service


@pytest.mark.unit
class TestQuestions:

    def test_ask_and_list_newest_first(self, test_db, users, item_id):
        first = question_service.ask(test_db, item_id, users["bob"], "Does it work?")
        second = question_service.ask(test_db, item_id, users["carol"], "Any scratches?")

        questions = question_service.list_by_item(test_db, item_id)

        assert [q["question_id"] for q in questions] == [second, first]
        assert questions[0]["question_text"] == "Any scratches?"
        assert questions[0]["answer_text"] is None
        assert questions[0]["user_id"] == users["carol"]
        assert questions[0]["first_name"] == "Carol"

    def test_seller_cannot_ask(self, test_db, users, item_id):
        with pytest.raises(SellerCannotAsk):
            question_service.ask(test_db, item_id, users["alice"], "Hello?")

    def test_ask_unknown_item(self, test_db, users):
        with pytest.raises(ItemNotFound):
            question_service.ask(test_db, 404, users["bob"], "Hello?")

    def test_seller_answers_and_can_overwrite(self, test_db, users, item_id):
        question_id = question_service.ask(test_db, item_id, users["bob"], "Does it work?")

        question_service.answer(test_db, question_id, users["alice"], "Yes")
        question_service.answer(test_db, question_id, users["alice"], "Yes, tested today")

        assert question_service.list_by_item(test_db, item_id)[0]["answer_text"] == "Yes, tested today"

    def test_only_seller_answers(self, test_db, users, item_id):
        question_id = question_service.ask(test_db, item_id, users["bob"], "Does it work?")

        with pytest.raises(NotItemSeller):
            question_service.answer(test_db, question_id, users["bob"], "I hope so")

    def test_answer_unknown_question(self, test_db, users):
        with pytest.raises(QuestionNotFound):
            question_service.answer(test_db, 404, users["alice"], "Yes")

    def test_list_unknown_item(self, test_db):
        with pytest.raises(ItemNotFound):
            question_service.list_by_item(test_db, 404)

"""
Tests for the credential store: registration, login and session tokens
"""
import pytest

from app.core.exceptions import DuplicateEmail, InvalidCredentials, InvalidToken, UserNotFound
from app.models.user import User
from app.services.auth_service import auth_service
from app.services.bid_ledger import bid_ledger
from app.services.item_service import item_service

from conftest import HOUR, PASSWORD, T0


@pytest.mark.unit
class TestRegistration:

    def test_register_stores_salted_hash(self, test_db, users):
        user = test_db.query(User).filter(User.id == users["alice"]).one()

        assert user.password != PASSWORD
        assert user.salt
        assert user.session_token is None

    def test_duplicate_email_rejected(self, test_db, users):
        with pytest.raises(DuplicateEmail):
            auth_service.register(
                test_db, first_name="Other", last_name="Alice",
                email="alice@example.com", password="Another#99",
            )

        # original account is untouched and can still log in
        assert auth_service.authenticate(test_db, "alice@example.com", PASSWORD) == users["alice"]
        assert test_db.query(User).filter(User.email == "alice@example.com").count() == 1


@pytest.mark.unit
class TestAuthenticate:

    def test_valid_credentials(self, test_db, users):
        assert auth_service.authenticate(test_db, "bob@example.com", PASSWORD) == users["bob"]

    def test_unknown_email(self, test_db, users):
        with pytest.raises(UserNotFound):
            auth_service.authenticate(test_db, "nobody@example.com", PASSWORD)

    def test_wrong_password(self, test_db, users):
        with pytest.raises(InvalidCredentials):
            auth_service.authenticate(test_db, "bob@example.com", "Wrong#123")


@pytest.mark.unit
class TestSessionTokens:

    def test_issue_twice_returns_same_token(self, test_db, users):
        first = auth_service.issue_or_reuse_token(test_db, users["alice"])
        second = auth_service.issue_or_reuse_token(test_db, users["alice"])

        assert first == second
        assert auth_service.resolve_token(test_db, first) == users["alice"]

    def test_tokens_differ_between_users(self, test_db, users):
        alice = auth_service.issue_or_reuse_token(test_db, users["alice"])
        bob = auth_service.issue_or_reuse_token(test_db, users["bob"])

        assert alice != bob
        assert auth_service.resolve_token(test_db, bob) == users["bob"]

    def test_revoke_invalidates_token(self, test_db, users):
        token = auth_service.issue_or_reuse_token(test_db, users["alice"])
        auth_service.revoke_token(test_db, token)

        with pytest.raises(InvalidToken):
            auth_service.resolve_token(test_db, token)

    def test_revoke_twice_and_unknown_is_noop(self, test_db, users):
        token = auth_service.issue_or_reuse_token(test_db, users["alice"])
        auth_service.revoke_token(test_db, token)
        auth_service.revoke_token(test_db, token)
        auth_service.revoke_token(test_db, "not-a-token")

    def test_new_token_after_revoke(self, test_db, users):
        old = auth_service.issue_or_reuse_token(test_db, users["alice"])
        auth_service.revoke_token(test_db, old)
        new = auth_service.issue_or_reuse_token(test_db, users["alice"])

        assert new != old
        assert auth_service.resolve_token(test_db, new) == users["alice"]

    @pytest.mark.parametrize("token", [None, "", "deadbeef"])
    def test_resolve_rejects_missing_and_unknown(self, test_db, users, token):
        with pytest.raises(InvalidToken):
            auth_service.resolve_token(test_db, token)

    def test_issue_for_unknown_user(self, test_db):
        with pytest.raises(UserNotFound):
            auth_service.issue_or_reuse_token(test_db, 999)


@pytest.mark.unit
class TestUserProfile:

    def test_profile_lists(self, test_db, users, frozen_clock):
        running = item_service.create_item(
            test_db, users["alice"], "Lamp", "Desk lamp", 5, T0 + 2 * HOUR
        )
        ending = item_service.create_item(
            test_db, users["alice"], "Chair", "Oak chair", 20, T0 + HOUR
        )
        bobs = item_service.create_item(
            test_db, users["bob"], "Bike", "Road bike", 100, T0 + 3 * HOUR
        )
        bid_ledger.append(test_db, bobs, users["alice"], 150, T0 + 1)

        frozen_clock(T0 + HOUR)
        profile = auth_service.get_user_profile(test_db, users["alice"])

        assert profile["user_id"] == users["alice"]
        assert profile["first_name"] == "Alice"
        assert [i["item_id"] for i in profile["selling"]] == [running]
        assert [i["item_id"] for i in profile["auctions_ended"]] == [ending]
        assert [i["item_id"] for i in profile["bidding_on"]] == [bobs]
        assert profile["bidding_on"][0]["first_name"] == "Bob"

    def test_bidding_on_is_distinct_and_most_recent_first(self, test_db, users, frozen_clock):
        first = item_service.create_item(test_db, users["alice"], "A", "a", 1, T0 + HOUR)
        second = item_service.create_item(test_db, users["alice"], "B", "b", 1, T0 + HOUR)
        bid_ledger.append(test_db, first, users["bob"], 2, T0 + 1)
        bid_ledger.append(test_db, second, users["bob"], 2, T0 + 2)
        bid_ledger.append(test_db, first, users["bob"], 3, T0 + 3)

        profile = auth_service.get_user_profile(test_db, users["bob"])

        assert [i["item_id"] for i in profile["bidding_on"]] == [first, second]

    def test_unknown_user(self, test_db):
        with pytest.raises(UserNotFound):
            auth_service.get_user_profile(test_db, 42)

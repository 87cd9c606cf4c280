"""Tests для User aggregate."""

import pytest

from clean_ddd.domain.shared import (
    Email,
    InvalidEmailError,
    InvalidStateTransition,
    UserId,
    ValidationError,
)
from clean_ddd.domain.users import (
    User,
    UserDeleted,
    UserProfileUpdated,
    UserRegistered,
)


@pytest.fixture
def user() -> User:
    user = User.register(UserId("u-1"), "Alice", "alice@example.com")
    user.clear_pending_events()
    return user


class TestUserRegistration:
    def test_register_emits_event(self):
        user = User.register(UserId("u-1"), "  Alice ", "alice@Example.com")

        assert user.name == "Alice"
        assert user.email == Email("alice@example.com")
        (event,) = user.pending_events()
        assert isinstance(event, UserRegistered)
        assert event.email == "alice@example.com"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            User.register(UserId("u-1"), " ", "alice@example.com")

    def test_invalid_email_rejected(self):
        with pytest.raises(InvalidEmailError):
            User.register(UserId("u-1"), "Alice", "alice")


class TestUserProfile:
    def test_update_profile(self, user):
        user.update_profile("Alice B.", "alice.b@example.com")

        assert user.name == "Alice B."
        assert str(user.email) == "alice.b@example.com"
        assert user.updated_at is not None
        (event,) = user.pending_events()
        assert isinstance(event, UserProfileUpdated)

    def test_invalid_update_leaves_state_unchanged(self, user):
        with pytest.raises(InvalidEmailError):
            user.update_profile("Alice B.", "broken")

        assert user.name == "Alice"
        assert user.pending_events() == ()


class TestUserDeletion:
    def test_delete_emits_event(self, user):
        user.delete()

        assert user.is_deleted
        (event,) = user.pending_events()
        assert isinstance(event, UserDeleted)
        assert event.aggregate_id == "u-1"

    def test_delete_twice_rejected(self, user):
        user.delete()

        with pytest.raises(InvalidStateTransition):
            user.delete()

    def test_update_after_delete_rejected(self, user):
        user.delete()

        with pytest.raises(InvalidStateTransition):
            user.update_profile("Bob", "bob@example.com")

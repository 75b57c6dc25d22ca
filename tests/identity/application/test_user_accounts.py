"""Application tests for user registration and updates via domain.process()."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.identity.lookup import find_user
from storefront.identity.passwords import get_hasher
from storefront.identity.registration import RegisterUser, UpdateUser
from storefront.identity.user import User


def _register(email="ada@example.com", **overrides):
    data = {
        "user_name": "ada",
        "email": email,
        "password": "s3cret-pass",
        "address": "12 Analytical Row",
    }
    data.update(overrides)
    return current_domain.process(RegisterUser(**data), asynchronous=False)


class TestRegisterUserFlow:
    def test_register_user_happy_path(self):
        user_id = _register()
        assert user_id is not None

        user = current_domain.repository_for(User).get(user_id)
        assert user.user_name == "ada"
        assert user.email == "ada@example.com"
        assert user.address == "12 Analytical Row"

    def test_password_is_stored_hashed(self):
        user_id = _register()
        user = find_user(user_id)
        assert user.password != "s3cret-pass"
        assert get_hasher().verify("s3cret-pass", user.password)

    def test_duplicate_email_is_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(email="ADA@example.com", user_name="another")
        assert "email" in exc.value.messages


class TestUpdateUserFlow:
    def test_update_changes_supplied_fields_only(self):
        user_id = _register()
        current_domain.process(UpdateUser(user_id=user_id, address="7 Engine Lane"), asynchronous=False)

        user = find_user(user_id)
        assert user.address == "7 Engine Lane"
        assert user.user_name == "ada"

    def test_update_rehashes_password(self):
        user_id = _register()
        current_domain.process(UpdateUser(user_id=user_id, password="brand-new-pass"), asynchronous=False)

        user = find_user(user_id)
        assert get_hasher().verify("brand-new-pass", user.password)
        assert not get_hasher().verify("s3cret-pass", user.password)


class TestFindUser:
    def test_unknown_id_returns_none(self):
        assert find_user("does-not-exist") is None

    def test_empty_id_returns_none(self):
        assert find_user(None) is None

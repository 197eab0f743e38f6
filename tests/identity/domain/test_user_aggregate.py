import pytest
from protean.exceptions import ValidationError

from storefront.identity.role.role import Authority, Role
from storefront.identity.user.user import User


def _user(**overrides):
    fields = {"name": "Maria Brown", "email": "maria@gmail.com", "password": "123456"}
    fields.update(overrides)
    return User.register(**fields)


class TestRegister:
    def test_password_is_hashed(self):
        user = _user()
        assert user.password_hash != "123456"
        assert user.check_password("123456")
        assert not user.check_password("wrong")

    def test_email_is_normalized(self):
        assert _user(email="  Maria@Gmail.COM ").email == "maria@gmail.com"

    @pytest.mark.parametrize("email", ["maria", "maria@", "@gmail.com", "maria@gmail", "ma ria@gmail.com"])
    def test_malformed_email_is_rejected(self, email):
        with pytest.raises(ValidationError) as exc:
            _user(email=email)
        assert "email" in exc.value.messages

    def test_password_is_required(self):
        with pytest.raises(ValidationError) as exc:
            _user(password="")
        assert "password" in exc.value.messages

    def test_role_ids_are_stored_as_strings(self):
        role = Role(authority=Authority.ADMIN.value)
        assert _user(role_ids=[role.id]).role_ids == [str(role.id)]

"""User aggregate root, the login identity behind a bearer token."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Date, DateTime, List, String

from storefront.domain import storefront
from storefront.identity.auth.passwords import hash_password, verify_password


@storefront.aggregate
class User:
    """A registered person. ``email`` is the login name and is unique across users."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    phone: String(max_length=30)
    birth_date: Date()
    password_hash: String(required=True, max_length=255)
    role_ids: List(content_type=String)
    created_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        if email.count("@") != 1 or " " in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, name, email, password, phone=None, birth_date=None, role_ids=None):
        if not password:
            raise ValidationError({"password": ["Password is required"]})

        return cls(
            name=name,
            email=(email or "").strip().lower(),
            phone=phone,
            birth_date=birth_date,
            password_hash=hash_password(password),
            role_ids=[str(role_id) for role_id in role_ids or []],
            created_at=datetime.now(UTC),
        )

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email):
        if not email:
            return None
        return self._dao.query.filter(email=email.strip().lower()).all().first

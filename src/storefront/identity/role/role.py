"""Role aggregate: the authorities a user can hold."""

from enum import Enum

from protean.fields import String

from storefront.domain import storefront


class Authority(Enum):
    CLIENT = "ROLE_CLIENT"
    ADMIN = "ROLE_ADMIN"


@storefront.aggregate
class Role:
    authority: String(required=True, max_length=50, choices=Authority)


@storefront.repository(part_of=Role)
class RoleRepository:
    def find_by_authority(self, authority):
        return self._dao.query.filter(authority=authority).all().first

    def authorities_for(self, role_ids):
        """Authority names for the given role ids; unknown ids are ignored."""
        if not role_ids:
            return frozenset()

        roles = self._dao.query.filter(id__in=list(role_ids)).all().items
        return frozenset(role.authority for role in roles)

    def ensure(self, authority):
        """Return the role for ``authority``, creating it on first use."""
        role = self.find_by_authority(authority)
        if role is None:
            role = Role(authority=authority)
            self.add(role)
        return role

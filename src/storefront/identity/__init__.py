"""Identity area: roles, user accounts and bearer-token authentication."""

from storefront.identity.role import role  # noqa: F401
from storefront.identity.user import registration, user  # noqa: F401

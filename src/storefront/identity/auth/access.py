"""Role checks and the order read guard.

Both are plain decision functions over a resolved Principal. Route handlers
call ``ensure_any_role`` first, before any business logic runs.
"""

from storefront.identity.auth.principal import Principal
from storefront.identity.role.role import Authority
from storefront.shared.exceptions import ForbiddenError


def ensure_any_role(principal: Principal, *authorities) -> Principal:
    """Raise ForbiddenError unless the principal holds one of ``authorities``."""
    if not principal.has_role(*authorities):
        raise ForbiddenError()
    return principal


def authorize_read(order, principal: Principal) -> bool:
    """Admins read any order; clients read only their own."""
    if principal.is_admin:
        return True

    if principal.has_role(Authority.CLIENT) and str(order.client_id) == principal.user_id:
        return True

    raise ForbiddenError()

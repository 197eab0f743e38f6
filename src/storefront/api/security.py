"""Request authentication dependencies.

Protected routes compose ``authenticate -> authorize`` through these
dependencies, so both run before the request body reaches any command.
"""

from fastapi import Depends, Header

from storefront.identity.auth.access import ensure_any_role
from storefront.identity.auth.principal import Principal, authenticate


async def current_principal(authorization: str | None = Header(default=None)) -> Principal:
    return authenticate(authorization)


def require_any_role(*authorities):
    """Dependency that resolves the principal and checks it holds one of ``authorities``."""

    async def dependency(principal: Principal = Depends(current_principal)) -> Principal:
        return ensure_any_role(principal, *authorities)

    return dependency

"""Resolving the authenticated principal behind a request.

The HTTP layer hands over the raw ``Authorization`` header; everything after
that (scheme check, token verification, user and role lookup) happens here.
"""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.auth.tokens import decode_token, issue_token
from storefront.identity.role.role import Authority, Role
from storefront.identity.user.user import User
from storefront.shared.exceptions import UnauthorizedError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Principal:
    """The authenticated identity making a request, with its role set."""

    user_id: str
    email: str
    authorities: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, *authorities) -> bool:
        wanted = {a.value if isinstance(a, Authority) else a for a in authorities}
        return bool(self.authorities & wanted)

    @property
    def is_admin(self) -> bool:
        return self.has_role(Authority.ADMIN)


@dataclass(frozen=True)
class IssuedToken:
    access_token: str
    expires_in: int
    token_type: str = "bearer"


def _principal_for(user) -> Principal:
    authorities = current_domain.repository_for(Role).authorities_for(user.role_ids)
    return Principal(user_id=str(user.id), email=user.email, authorities=authorities)


def login(username, password) -> IssuedToken:
    """Exchange credentials for a bearer token."""
    user = current_domain.repository_for(User).find_by_email(username)
    if user is None or not user.check_password(password):
        logger.warning("auth.login_failed", username=username)
        raise UnauthorizedError("Bad credentials")

    principal = _principal_for(user)
    token, expires_in = issue_token(principal.user_id, principal.email, principal.authorities)
    logger.info("auth.token_issued", user_id=principal.user_id)
    return IssuedToken(access_token=token, expires_in=expires_in)


def authenticate(authorization: str | None) -> Principal:
    """Turn an ``Authorization: Bearer <token>`` header into a Principal."""
    if not authorization:
        raise UnauthorizedError()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Bearer token required")

    claims = decode_token(token.strip())
    try:
        user = current_domain.repository_for(User).get(claims["sub"])
    except ObjectNotFoundError:
        logger.warning("auth.unknown_subject", subject=claims["sub"])
        raise UnauthorizedError("Invalid or expired token") from None

    return _principal_for(user)

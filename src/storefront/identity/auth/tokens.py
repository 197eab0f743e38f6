"""Bearer token issuance and verification (HS256 JWT via python-jose)."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from storefront.config import get_settings
from storefront.shared.exceptions import UnauthorizedError


def issue_token(user_id, email, authorities) -> tuple[str, int]:
    """Return ``(access_token, expires_in_seconds)`` for the given identity."""
    settings = get_settings()
    expires_in = settings.access_token_ttl_seconds
    now = datetime.now(UTC)

    claims = {
        "sub": str(user_id),
        "user_name": email,
        "authorities": sorted(authorities),
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    token = jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return token, expires_in


def decode_token(token: str) -> dict:
    """Verify signature and expiry, returning the claims.

    Raises ``UnauthorizedError`` for anything that is not a valid, current token.
    """
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise UnauthorizedError("Invalid or expired token") from exc

    if not claims.get("sub"):
        raise UnauthorizedError("Invalid or expired token")
    return claims

"""FastAPI endpoints for token issuance and the current user."""

from fastapi import APIRouter, Depends, Form
from protean.utils.globals import current_domain

from storefront.api.security import current_principal
from storefront.identity.api.schemas import TokenResponse, UserResponse
from storefront.identity.auth.principal import Principal, login
from storefront.identity.user.user import User
from storefront.shared.exceptions import UnauthorizedError

auth_router = APIRouter(prefix="/oauth2", tags=["auth"])
user_router = APIRouter(prefix="/users", tags=["users"])


@auth_router.post("/token", response_model=TokenResponse)
async def issue_token(
    grant_type: str = Form(...),
    username: str = Form(...),
    password: str = Form(...),
) -> TokenResponse:
    if grant_type != "password":
        raise UnauthorizedError(f"Unsupported grant type: {grant_type}")

    issued = login(username, password)
    return TokenResponse(
        access_token=issued.access_token,
        token_type=issued.token_type,
        expires_in=issued.expires_in,
    )


@user_router.get("/me", response_model=UserResponse)
async def get_me(principal: Principal = Depends(current_principal)) -> UserResponse:
    user = current_domain.repository_for(User).get(principal.user_id)
    return UserResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        phone=user.phone,
        birth_date=user.birth_date,
        roles=sorted(principal.authorities),
    )

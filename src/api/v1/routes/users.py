"""Account registration routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import get_auth_provider
from api.v1.dependencies import get_user_service
from api.v1.schemas.user import TokenResponse, UserRegister
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.user_service import UserService
from infrastructure.auth.jwt_provider import JWTAuthProvider

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "Account created, token issued"},
        400: {"description": "Invalid input or e-mail already registered"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserRegister,
    service: UserService = Depends(get_user_service),
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenResponse:
    """Create an account and return an identity token for it."""
    user = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return TokenResponse(token=auth_provider.create_token(user.id))

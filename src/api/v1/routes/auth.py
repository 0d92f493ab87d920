"""Login and current-user routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser, get_auth_provider
from api.v1.dependencies import get_user_service
from api.v1.schemas.user import LoginRequest, TokenResponse, UserDetailResponse, UserResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.user_service import UserService
from infrastructure.auth.jwt_provider import JWTAuthProvider

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserDetailResponse,
    summary="Get the authenticated user",
    responses={
        401: {"description": "Missing or invalid token"},
        404: {"description": "Account no longer exists"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_me(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Return the caller's account without the password hash."""
    account = await service.get_by_id(user.id)
    return UserDetailResponse(data=UserResponse.model_validate(account))


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        200: {"description": "Credentials accepted, token issued"},
        400: {"description": "Invalid credentials"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: UserService = Depends(get_user_service),
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenResponse:
    """Exchange e-mail and password for an identity token."""
    user = await service.authenticate(body.email, body.password)
    return TokenResponse(token=auth_provider.create_token(user.id))

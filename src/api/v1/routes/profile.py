"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_github_client, get_profile_service, get_user_service
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.profile import (
    EducationCreate,
    EducationResponse,
    ExperienceCreate,
    ExperienceResponse,
    GithubRepoListResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileOwner,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.profile import Profile
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.github.client import GitHubClient

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get own profile",
    responses={400: {"description": "There is no profile for this user"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_own_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile."""
    profile = await service.get_for_user(user.id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update own profile",
    responses={400: {"description": "status and skills are required"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the caller's profile, or merge the supplied fields into it."""
    profile = await service.upsert(user.id, body.to_fields())
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Public list of every profile."""
    profiles = await service.list_all()
    return ProfileListResponse(data=[_build_profile_response(p) for p in profiles])


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get profile by user ID",
    responses={400: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Public lookup of a user's profile."""
    profile = await service.get_by_user_id(user_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete account",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete the caller's profile and account. Their posts remain."""
    await service.delete_account(user.id)
    return MessageResponse(message="User deleted")


@router.put(
    "/experience",
    response_model=ProfileDetailResponse,
    summary="Add profile experience",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry to the top of the caller's list."""
    profile = await service.add_experience(user.id, body.to_entity())
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileDetailResponse,
    summary="Remove profile experience",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry by ID."""
    profile = await service.remove_experience(user.id, exp_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.put(
    "/education",
    response_model=ProfileDetailResponse,
    summary="Add profile education",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry to the top of the caller's list."""
    profile = await service.add_education(user.id, body.to_entity())
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileDetailResponse,
    summary="Remove profile education",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry by ID."""
    profile = await service.remove_education(user.id, edu_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.get(
    "/github/{username}",
    response_model=GithubRepoListResponse,
    summary="Get GitHub repositories",
    responses={
        404: {"description": "No Github profile found"},
        502: {"description": "GitHub unreachable"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_github_repos(
    request: Request,
    username: str,
    client: GitHubClient = Depends(get_github_client),
) -> GithubRepoListResponse:
    """List the five most recently created public repositories of a GitHub user."""
    repos = await client.get_repos(username)
    return GithubRepoListResponse(data=repos)


def _build_profile_response(profile: Profile) -> ProfileResponse:
    """Build ProfileResponse from a Profile entity."""
    return ProfileResponse(
        id=profile.id,
        user=ProfileOwner(
            id=profile.user_id,
            name=profile.owner_name,
            avatar=profile.owner_avatar,
        ),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        githubusername=profile.github_username,
        skills=profile.skills,
        social=profile.social,
        experience=[ExperienceResponse.model_validate(e) for e in profile.experience],
        education=[EducationResponse.model_validate(e) for e in profile.education],
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )

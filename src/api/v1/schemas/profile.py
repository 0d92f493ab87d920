"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import SOCIAL_PLATFORMS, Education, Experience, ProfileFields


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    Social links are flat fields, one per platform.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    status: str = Field(..., min_length=1, max_length=255)
    skills: str = Field(..., min_length=1, description="Comma-separated list")
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    githubusername: str | None = Field(None, max_length=100)
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def to_fields(self) -> ProfileFields:
        """Empty strings count as absent and leave the stored value alone."""
        social = {}
        for platform in SOCIAL_PLATFORMS:
            value = _blank_to_none(getattr(self, platform))
            if value is not None:
                social[platform] = value
        return ProfileFields(
            company=_blank_to_none(self.company),
            website=_blank_to_none(self.website),
            location=_blank_to_none(self.location),
            bio=_blank_to_none(self.bio),
            status=_blank_to_none(self.status),
            github_username=_blank_to_none(self.githubusername),
            skills=_blank_to_none(self.skills),
            social=social,
        )


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    def to_entity(self) -> Experience:
        return Experience(
            title=self.title,
            company=self.company,
            location=self.location,
            from_date=self.from_date,
            to_date=self.to_date,
            current=self.current,
            description=self.description,
        )


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., min_length=1, max_length=255)
    degree: str = Field(..., min_length=1, max_length=255)
    field_of_study: str = Field(..., min_length=1, max_length=255, alias="fieldofstudy")
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    def to_entity(self) -> Education:
        return Education(
            school=self.school,
            degree=self.degree,
            field_of_study=self.field_of_study,
            from_date=self.from_date,
            to_date=self.to_date,
            current=self.current,
            description=self.description,
        )


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None = None


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str = Field(..., alias="fieldofstudy")
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None = None


class ProfileOwner(BaseModel):
    """The profile owner's public identity."""

    id: UUID
    name: str | None = None
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    id: UUID
    user: ProfileOwner
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
    updated_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class GithubRepoListResponse(BaseModel):
    """Repositories exactly as GitHub returns them."""

    data: list[dict[str, Any]]

"""Profile domain entity and its sub-collection entries."""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from uuid import UUID, uuid4

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skills string and trim every entry.

    Empty entries are kept: ``"a,,b"`` becomes ``["a", "", "b"]``.
    """
    return [skill.strip() for skill in raw.split(",")]


@dataclass
class Experience:
    """A single job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Education:
    """A single school attended by the profile owner."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class ProfileFields:
    """Partial update for a profile.

    ``None`` means "leave unchanged". There is no way to clear a field.
    """

    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: str | None = None
    social: dict[str, str] = field(default_factory=dict)

    def present(self) -> dict[str, object]:
        """Scalar attributes that carry a value, with skills normalized."""
        values: dict[str, object] = {}
        for f in fields(self):
            if f.name == "social":
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            values[f.name] = parse_skills(value) if f.name == "skills" else value
        return values


@dataclass
class Profile:
    """Domain entity for a user's public profile (one per user)."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    owner_name: str | None = None
    owner_avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def apply(self, changes: ProfileFields) -> None:
        """Merge a partial update into this profile in place."""
        for name, value in changes.present().items():
            setattr(self, name, value)
        merged = dict(self.social)
        merged.update({k: v for k, v in changes.social.items() if v})
        self.social = merged
        self.updated_at = datetime.utcnow()

"""Post domain entity with likes and comments."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """One user's like on a post."""

    user_id: UUID
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Comment:
    """A comment; ``name``/``avatar`` are snapshots of the author at write time."""

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a post."""

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id


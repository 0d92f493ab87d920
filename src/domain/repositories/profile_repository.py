"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Education, Experience, Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile aggregates.

    Sub-collection writes are single-row inserts/deletes so concurrent
    writers on the same profile never overwrite each other.
    """

    async def get_for_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user, with owner name/avatar."""
        ...

    async def get_id_for_user(self, user_id: UUID) -> UUID | None:
        """Get only the profile id owned by a user."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every profile."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist scalar attributes, skills and social links."""
        ...

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete a user's profile with all of its entries."""
        ...

    async def add_experience(self, profile_id: UUID, entry: Experience) -> Experience:
        """Insert an experience entry."""
        ...

    async def remove_experience(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete an experience entry by id; False when nothing matched."""
        ...

    async def add_education(self, profile_id: UUID, entry: Education) -> Education:
        """Insert an education entry."""
        ...

    async def remove_education(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete an education entry by id; False when nothing matched."""
        ...

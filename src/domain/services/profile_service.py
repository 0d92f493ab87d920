"""Profile service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import Education, Experience, Profile, ProfileFields
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def upsert(self, user_id: UUID, changes: ProfileFields) -> Profile:
        """Create the user's profile or merge the present fields into it."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_for_user(user_id)
            if profile is None:
                profile = Profile(user_id=user_id)
                profile.apply(changes)
                saved = await uow.profiles.create(profile)
                created = True
            else:
                profile.apply(changes)
                saved = await uow.profiles.update(profile)
                created = False
            await uow.commit()

        logger.info("profile_upserted", user_id=str(user_id), created=created)
        return saved

    async def get_for_user(self, user_id: UUID) -> Profile:
        """Get the caller's own profile."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_for_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id), status_code=400)
            return profile

    async def get_by_user_id(self, user_id: UUID) -> Profile:
        """Public lookup of any user's profile."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_for_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id), status_code=400)
            return profile

    async def list_all(self) -> list[Profile]:
        """Get every profile."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()  # type: ignore[no-any-return]

    async def add_experience(self, user_id: UUID, entry: Experience) -> Profile:
        """Add an experience entry at the head of the list."""
        async with self._uow_factory() as uow:
            profile_id = await self._require_profile_id(uow, user_id)
            await uow.profiles.add_experience(profile_id, entry)
            await uow.commit()
            return await self._reload(uow, user_id)

    async def remove_experience(self, user_id: UUID, entry_id: UUID) -> Profile:
        """Remove an experience entry by id. Unknown ids are ignored."""
        async with self._uow_factory() as uow:
            profile_id = await self._require_profile_id(uow, user_id)
            removed = await uow.profiles.remove_experience(profile_id, entry_id)
            if not removed:
                logger.debug("experience_not_present", entry_id=str(entry_id))
            await uow.commit()
            return await self._reload(uow, user_id)

    async def add_education(self, user_id: UUID, entry: Education) -> Profile:
        """Add an education entry at the head of the list."""
        async with self._uow_factory() as uow:
            profile_id = await self._require_profile_id(uow, user_id)
            await uow.profiles.add_education(profile_id, entry)
            await uow.commit()
            return await self._reload(uow, user_id)

    async def remove_education(self, user_id: UUID, entry_id: UUID) -> Profile:
        """Remove an education entry by id. Unknown ids are ignored."""
        async with self._uow_factory() as uow:
            profile_id = await self._require_profile_id(uow, user_id)
            removed = await uow.profiles.remove_education(profile_id, entry_id)
            if not removed:
                logger.debug("education_not_present", entry_id=str(entry_id))
            await uow.commit()
            return await self._reload(uow, user_id)

    async def _require_profile_id(self, uow: IUnitOfWork, user_id: UUID) -> UUID:
        profile_id = await uow.profiles.get_id_for_user(user_id)
        if profile_id is None:
            raise ProfileNotFoundError(str(user_id))
        return profile_id

    async def _reload(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_for_user(user_id)
        if not profile:
            # Removed by a concurrent account deletion
            raise ProfileNotFoundError(str(user_id))
        return profile

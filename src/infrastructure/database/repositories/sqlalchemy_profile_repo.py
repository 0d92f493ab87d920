"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.profile import Education, Experience, Profile
from infrastructure.database.models import EducationModel, ExperienceModel, ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_full(self):  # type: ignore[no-untyped-def]
        return (
            select(ProfileModel)
            .options(
                selectinload(ProfileModel.user),
                selectinload(ProfileModel.experience),
                selectinload(ProfileModel.education),
            )
            .execution_options(populate_existing=True)
        )

    async def get_for_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = self._select_full().where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_id_for_user(self, user_id: UUID) -> UUID | None:
        """Get the id of the profile owned by a user."""
        stmt = select(ProfileModel.id).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[Profile]:
        """Get every profile, oldest first."""
        stmt = self._select_full().order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            status=profile.status,
            github_username=profile.github_username,
            skills=list(profile.skills),
            social=dict(profile.social),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            experience=[],
            education=[],
        )
        self._session.add(model)
        await self._session.flush()
        created = await self.get_for_user(profile.user_id)
        if created is None:
            raise ValueError(f"Profile for {profile.user_id} vanished after insert")
        return created

    async def update(self, profile: Profile) -> Profile:
        """Update scalar attributes, skills and social links."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.status = profile.status
        model.github_username = profile.github_username
        model.skills = list(profile.skills)
        model.social = dict(profile.social)
        model.updated_at = profile.updated_at

        await self._session.flush()
        updated = await self.get_for_user(profile.user_id)
        if updated is None:
            raise ValueError(f"Profile {profile.id} not found")
        return updated

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete a user's profile and its entries."""
        profile_id = await self.get_id_for_user(user_id)
        if profile_id is None:
            return False

        await self._session.execute(
            delete(ExperienceModel).where(ExperienceModel.profile_id == profile_id)
        )
        await self._session.execute(
            delete(EducationModel).where(EducationModel.profile_id == profile_id)
        )
        await self._session.execute(delete(ProfileModel).where(ProfileModel.id == profile_id))
        await self._session.flush()
        return True

    async def add_experience(self, profile_id: UUID, entry: Experience) -> Experience:
        """Insert an experience entry."""
        model = ExperienceModel(
            id=entry.id,
            profile_id=profile_id,
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
            created_at=entry.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._experience_to_entity(model)

    async def remove_experience(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete an experience entry scoped to the profile."""
        stmt = delete(ExperienceModel).where(
            ExperienceModel.id == entry_id,
            ExperienceModel.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def add_education(self, profile_id: UUID, entry: Education) -> Education:
        """Insert an education entry."""
        model = EducationModel(
            id=entry.id,
            profile_id=profile_id,
            school=entry.school,
            degree=entry.degree,
            field_of_study=entry.field_of_study,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
            created_at=entry.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._education_to_entity(model)

    async def remove_education(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete an education entry scoped to the profile."""
        stmt = delete(EducationModel).where(
            EducationModel.id == entry_id,
            EducationModel.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model (with user and entries loaded) to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            status=model.status,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[self._experience_to_entity(e) for e in model.experience],
            education=[self._education_to_entity(e) for e in model.education],
            owner_name=model.user.name if model.user else None,
            owner_avatar=model.user.avatar if model.user else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _experience_to_entity(self, model: ExperienceModel) -> Experience:
        return Experience(
            id=model.id,
            title=model.title,
            company=model.company,
            location=model.location,
            from_date=model.from_date,
            to_date=model.to_date,
            current=model.current,
            description=model.description,
            created_at=model.created_at,
        )

    def _education_to_entity(self, model: EducationModel) -> Education:
        return Education(
            id=model.id,
            school=model.school,
            degree=model.degree,
            field_of_study=model.field_of_study,
            from_date=model.from_date,
            to_date=model.to_date,
            current=model.current,
            description=model.description,
            created_at=model.created_at,
        )

"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile
from infrastructure.database.errors import to_constraint_error
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_nickname(self, nickname: str) -> Profile | None:
        """Get a profile by nickname."""
        stmt = select(ProfileModel).where(ProfileModel.nickname == nickname)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.to_entity(model) if model else None

    async def get_for_member(self, member_id: UUID) -> Profile | None:
        """Get the profile owned by a member."""
        stmt = select(ProfileModel).where(ProfileModel.member_id == member_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.to_entity(model) if model else None

    async def save(self, profile: Profile) -> Profile:
        """Insert a new profile or update an existing one."""
        model = await self._session.get(ProfileModel, profile.id)
        if model:
            model.member_id = profile.member_id
            model.nickname = profile.nickname
            model.thumbnail_image = profile.thumbnail_image
            model.personal_status = profile.personal_status
            model.updated_at = profile.updated_at
        else:
            self._session.add(self._to_model(profile))

        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise to_constraint_error(exc, ("nickname", "member_id")) from exc
        return profile

    @staticmethod
    def to_entity(model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            member_id=model.member_id,
            nickname=model.nickname,
            thumbnail_image=model.thumbnail_image,
            personal_status=model.personal_status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            member_id=entity.member_id,
            nickname=entity.nickname,
            thumbnail_image=entity.thumbnail_image,
            personal_status=entity.personal_status,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

"""SQLAlchemy implementation of Member repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.member import Member
from domain.entities.profile import Profile
from infrastructure.database.errors import to_constraint_error
from infrastructure.database.models import MemberModel
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfileRepository,
)


class SQLAlchemyMemberRepository:
    """SQLAlchemy implementation of IMemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Member | None:
        """Get a member by ID."""
        stmt = (
            select(MemberModel)
            .options(selectinload(MemberModel.profile))
            .where(MemberModel.id == id)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Member | None:
        """Get a member by email."""
        stmt = (
            select(MemberModel)
            .options(selectinload(MemberModel.profile))
            .where(MemberModel.email == email)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, member: Member) -> Member:
        """Insert a new member or update an existing one.

        The profile is persisted through the profile repository.
        """
        model = await self._session.get(MemberModel, member.id)
        if model:
            model.email = member.email
            model.password = member.password
            model.leaved = member.leaved
        else:
            self._session.add(self._to_model(member))

        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise to_constraint_error(exc, ("email",)) from exc
        return member

    def _to_entity(self, model: MemberModel) -> Member:
        """Convert ORM model (with profile loaded) to domain entity."""
        profile: Profile | None = None
        if model.profile is not None:
            profile = SQLAlchemyProfileRepository.to_entity(model.profile)
        return Member(
            id=model.id,
            email=model.email,
            password=model.password,
            leaved=model.leaved,
            profile=profile,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Member) -> MemberModel:
        """Convert domain entity to ORM model."""
        return MemberModel(
            id=entity.id,
            email=entity.email,
            password=entity.password,
            leaved=entity.leaved,
            created_at=entity.created_at,
        )

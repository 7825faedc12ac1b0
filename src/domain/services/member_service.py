"""Member service layer with business logic."""

from collections.abc import Callable

import structlog

from core.exceptions import (
    DuplicateNicknameError,
    InvalidCredentialsError,
    MemberAlreadyLeftError,
    MemberNotFoundError,
)
from domain.entities.member import Member
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.schemas.member import MemberIdentifyDTO, MemberJoinDTO
from domain.services.password_verifier import IPasswordVerifier

logger = structlog.get_logger()


class MemberService:
    """Service layer for member registration, profile and withdrawal rules.

    Every operation runs inside a single Unit of Work. Nickname uniqueness
    is checked here before storage; email uniqueness is left to the storage
    unique constraint and surfaces as StorageConstraintError.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_verifier: IPasswordVerifier,
    ) -> None:
        self._uow_factory = uow_factory
        self._passwords = password_verifier

    async def join(self, dto: MemberJoinDTO) -> None:
        """Register a new member together with its profile."""
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get_by_nickname(dto.nickname)
            if existing:
                raise DuplicateNicknameError(dto.nickname)

            member = Member.create(dto.email, self._passwords.hash(dto.password))
            profile = Profile(
                nickname=dto.nickname,
                thumbnail_image=dto.thumbnail_image,
                personal_status=dto.personal_status,
            )
            member.attach_profile(profile)

            await uow.members.save(member)
            await uow.profiles.save(profile)
            await uow.commit()

            logger.info("member_joined", member_id=str(member.id))

    async def update(self, dto: MemberJoinDTO) -> None:
        """Replace the display fields of a member's profile.

        A member without a profile adopts an ownerless profile holding the
        requested nickname, or gets a new one.
        """
        async with self._uow_factory() as uow:
            member = await self._get_member(uow, dto.email)

            profile = member.profile or await uow.profiles.get_for_member(member.id)
            if profile is None:
                profile = await self._adopt_or_create_profile(uow, dto)
            elif dto.nickname != profile.nickname:
                taken = await uow.profiles.get_by_nickname(dto.nickname)
                if taken and taken.id != profile.id:
                    raise DuplicateNicknameError(dto.nickname)

            profile.update_details(
                nickname=dto.nickname,
                thumbnail_image=dto.thumbnail_image,
                personal_status=dto.personal_status,
            )
            member.attach_profile(profile)

            await uow.profiles.save(profile)
            await uow.commit()

            logger.info("member_profile_updated", member_id=str(member.id))

    async def leave(self, dto: MemberIdentifyDTO) -> None:
        """Soft-delete a member after checking its credentials."""
        async with self._uow_factory() as uow:
            member = await self._get_member(uow, dto.email)
            # Left is terminal, whatever password was supplied.
            if member.leaved:
                raise MemberAlreadyLeftError(str(member.id))
            self._check_password(member, dto.password)

            member.leave()
            await uow.members.save(member)
            await uow.commit()

            logger.info("member_left", member_id=str(member.id))

    async def mine(self, dto: MemberIdentifyDTO) -> Member:
        """Return the caller's own member record, profile included."""
        async with self._uow_factory() as uow:
            member = await self._get_member(uow, dto.email)
            self._check_password(member, dto.password)
            return member

    async def _get_member(self, uow: IUnitOfWork, email: str) -> Member:
        """Load a member by email or raise MemberNotFoundError."""
        member = await uow.members.get_by_email(email)
        if not member:
            raise MemberNotFoundError(email)
        return member

    async def _adopt_or_create_profile(self, uow: IUnitOfWork, dto: MemberJoinDTO) -> Profile:
        """Reuse an ownerless profile with the nickname, else build a new one."""
        existing = await uow.profiles.get_by_nickname(dto.nickname)
        if existing is None:
            return Profile(
                nickname=dto.nickname,
                thumbnail_image=dto.thumbnail_image,
                personal_status=dto.personal_status,
            )
        if existing.member_id is not None:
            raise DuplicateNicknameError(dto.nickname)
        return existing

    def _check_password(self, member: Member, raw_password: str) -> None:
        if not self._passwords.verify(raw_password, member.password):
            logger.warning("member_credentials_rejected", member_id=str(member.id))
            raise InvalidCredentialsError()

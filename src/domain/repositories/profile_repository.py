"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by_nickname(self, nickname: str) -> Profile | None:
        """Get a profile by nickname."""
        ...

    async def get_for_member(self, member_id: UUID) -> Profile | None:
        """Get the profile owned by a member."""
        ...

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile.

        Raises StorageConstraintError when the nickname is already taken.
        """
        ...

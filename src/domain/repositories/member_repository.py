"""Member repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.member import Member


class IMemberRepository(Protocol):
    """Repository interface for Member entities."""

    async def get(self, id: UUID) -> Member | None:
        """Get a member by ID, with its profile loaded."""
        ...

    async def get_by_email(self, email: str) -> Member | None:
        """Get a member by email, with its profile loaded."""
        ...

    async def save(self, member: Member) -> Member:
        """Insert or update a member.

        Raises StorageConstraintError when the email is already taken.
        """
        ...

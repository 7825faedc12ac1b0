"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from core.exceptions import ValidationError


@dataclass
class Profile:
    """Display-facing attributes of a member, unique by nickname.

    The owning member is referenced by id only; the member holds the
    profile itself.
    """

    nickname: str
    thumbnail_image: str | None = None
    personal_status: str | None = None
    id: UUID = field(default_factory=uuid4)
    member_id: UUID | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Reject blank nicknames and keep timestamps ordered."""
        if not self.nickname or not self.nickname.strip():
            raise ValidationError("Nickname is required", details={"field": "nickname"})
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def update_details(
        self,
        nickname: str,
        thumbnail_image: str | None,
        personal_status: str | None,
    ) -> None:
        """Replace the display fields in place."""
        if not nickname or not nickname.strip():
            raise ValidationError("Nickname is required", details={"field": "nickname"})
        self.nickname = nickname
        self.thumbnail_image = thumbnail_image
        self.personal_status = personal_status
        self.updated_at = datetime.utcnow()

"""Member domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from core.exceptions import MemberAlreadyLeftError, ValidationError
from domain.entities.profile import Profile


@dataclass
class Member:
    """Identity record for a registered user.

    Members are never deleted; ``leaved`` marks the terminal Left state.
    """

    email: str
    password: str
    id: UUID = field(default_factory=uuid4)
    leaved: bool = False
    profile: Profile | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(cls, email: str, password: str) -> "Member":
        """Create a new active member."""
        if not email or not email.strip():
            raise ValidationError("Email is required", details={"field": "email"})
        if not password:
            raise ValidationError("Password is required", details={"field": "password"})
        return cls(email=email, password=password, leaved=False)

    @property
    def is_active(self) -> bool:
        return not self.leaved

    def attach_profile(self, profile: Profile) -> None:
        """Take ownership of a profile and point its back-reference here."""
        profile.member_id = self.id
        self.profile = profile

    def leave(self) -> None:
        """Move the member to the Left state. Left is terminal."""
        if self.leaved:
            raise MemberAlreadyLeftError(str(self.id))
        self.leaved = True

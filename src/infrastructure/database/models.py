"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class MemberModel(Base):
    """Member identity model. Rows are never deleted."""

    __tablename__ = "members"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    leaved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    profile: Mapped[Optional["ProfileModel"]] = relationship(
        "ProfileModel",
        back_populates="member",
        uselist=False,
        lazy="raise",
    )

    __table_args__ = (UniqueConstraint("email", name="uq_members_email"),)


class ProfileModel(Base):
    """Member profile model."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    member_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("members.id"),
    )
    nickname: Mapped[str] = mapped_column(String(50), nullable=False)
    thumbnail_image: Mapped[str | None] = mapped_column(String(500))
    personal_status: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # Relationships
    member: Mapped[Optional["MemberModel"]] = relationship(
        "MemberModel",
        back_populates="profile",
        lazy="raise",
    )

    __table_args__ = (
        UniqueConstraint("nickname", name="uq_profiles_nickname"),
        UniqueConstraint("member_id", name="uq_profiles_member_id"),
    )

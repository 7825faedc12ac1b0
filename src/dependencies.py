"""Factories wiring the member service to the database."""

from functools import lru_cache
from collections.abc import Callable

from core.logging import setup_logging
from domain.services.member_service import MemberService
from infrastructure.auth.plaintext_verifier import PlainTextPasswordVerifier
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Initialize structured logging
setup_logging()


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_member_service() -> MemberService:
    """Get Member service instance."""
    return MemberService(
        get_uow_factory(),
        password_verifier=PlainTextPasswordVerifier(),
    )

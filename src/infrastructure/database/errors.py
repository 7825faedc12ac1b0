"""Translation of driver integrity errors into domain errors."""

from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError

from core.exceptions import StorageConstraintError


def to_constraint_error(exc: IntegrityError, fields: Iterable[str]) -> StorageConstraintError:
    """Build a StorageConstraintError naming the first field found in the driver message.

    SQLite reports ``UNIQUE constraint failed: members.email``; PostgreSQL
    reports the constraint name, which embeds the column.
    """
    orig = str(exc.orig).lower() if exc.orig else str(exc).lower()
    for candidate in fields:
        if candidate in orig:
            return StorageConstraintError(candidate)
    return StorageConstraintError()

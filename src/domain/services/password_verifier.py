"""Password verification protocol used by the member service."""

from typing import Protocol


class IPasswordVerifier(Protocol):
    """Protocol for turning raw passwords into stored values and checking them."""

    def hash(self, raw_password: str) -> str:
        """
        Produce the value to store for a raw password.

        Args:
            raw_password: The password as supplied by the member

        Returns:
            The string persisted on the member record
        """
        ...

    def verify(self, raw_password: str, stored_password: str) -> bool:
        """
        Check a raw password against a stored value.

        Args:
            raw_password: The password as supplied by the member
            stored_password: The value persisted on the member record

        Returns:
            True if the password matches
        """
        ...

"""Plain-text password verifier."""

import hmac


class PlainTextPasswordVerifier:
    """Stores passwords unchanged and compares them in constant time."""

    def hash(self, raw_password: str) -> str:
        return raw_password

    def verify(self, raw_password: str, stored_password: str) -> bool:
        return hmac.compare_digest(
            raw_password.encode("utf-8"), stored_password.encode("utf-8")
        )

"""Password hashing port used by registration and login."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """One-way password hashing.

    verify_password must return False (not raise) for a malformed hash, so
    a corrupted row reads as a failed login.
    """

    def hash_password(self, password: str) -> str: ...

    def verify_password(self, password: str, password_hash: str) -> bool: ...

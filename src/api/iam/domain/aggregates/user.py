"""User aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, field

from iam.domain.value_objects import UserId


@dataclass(frozen=True)
class User:
    """User aggregate representing a registered account.

    Created once at registration and immutable afterwards. The password
    hash is opaque and is kept out of ``repr`` so it never reaches logs.
    """

    id: UserId
    username: str
    display_name: str
    password_hash: str = field(repr=False)
    gender: str
    location: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.username})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

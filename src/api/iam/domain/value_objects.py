"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate.

    Assigned by the store on insert (auto-increment primary key).
    """

    value: int

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)

    @classmethod
    def from_claim(cls, value: object) -> UserId:
        """Create UserId from a decoded token claim.

        Args:
            value: The raw ``userId`` claim

        Returns:
            UserId instance

        Raises:
            ValueError: If value is not a positive integer
        """
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError(f"Invalid UserId: {value!r}")
        return cls(value=value)

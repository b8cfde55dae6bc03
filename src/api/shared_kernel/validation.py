"""Input checks shared by application services."""

from typing import Any

from shared_kernel.exceptions import ValidationError

# Integer columns are 32-bit signed on every supported backend.
MAX_STORED_INT = 2**31 - 1


def require_fields(**values: Any) -> None:
    """Raise ValidationError naming every field that is absent or blank.

    Keyword names are the client-facing field names so the message can be
    returned as-is.
    """
    missing = [
        name
        for name, value in values.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def require_storable_int(field: str, value: Any, minimum: int) -> None:
    """Raise ValidationError unless value is an int column value >= minimum.

    Booleans are rejected even though they subclass int.
    """
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        qualifier = "non-negative" if minimum == 0 else "positive"
        raise ValidationError(f"{field} must be a {qualifier} integer")
    if value > MAX_STORED_INT:
        raise ValidationError(f"{field} must be at most {MAX_STORED_INT}")

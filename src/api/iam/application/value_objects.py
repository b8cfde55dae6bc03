"""Application-layer value objects for IAM bounded context.

These are value objects specific to the application layer, representing
cross-cutting concerns like the authentication context of a request.
"""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.value_objects import UserId


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity carried by a request whose bearer token validated.

    This is an application-layer concept (not domain) because it represents
    the authentication context of the request, not a core business entity.
    It is the only way identity reaches privileged operations.
    """

    user_id: UserId
    username: str

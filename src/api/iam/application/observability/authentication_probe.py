"""Protocol for authentication observability.

Defines the interface for domain probes that capture registration, login
and bearer-token authentication events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def user_registered(self, user_id: int, username: str) -> None:
        """Record that a new account was registered."""
        ...

    def registration_rejected(self, username: str | None, reason: str) -> None:
        """Record that a registration attempt was refused."""
        ...

    def login_succeeded(self, user_id: int, username: str) -> None:
        """Record that credentials verified and a token was issued."""
        ...

    def login_failed(self, username: str | None, reason: str) -> None:
        """Record a failed login. ``reason`` is for logs only, never the client."""
        ...

    def user_authenticated(self, user_id: int, username: str) -> None:
        """Record successful request authentication via bearer token."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that a privileged request was rejected at the gateway."""
        ...

    def with_context(self, context: ObservationContext) -> AuthenticationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAuthenticationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthenticationProbe(logger=self._logger, context=context)

    def user_registered(self, user_id: int, username: str) -> None:
        self._logger.info(
            "user_registered",
            user_id=user_id,
            username=username,
            **self._get_context_kwargs(),
        )

    def registration_rejected(self, username: str | None, reason: str) -> None:
        self._logger.info(
            "registration_rejected",
            username=username,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def login_succeeded(self, user_id: int, username: str) -> None:
        self._logger.info(
            "login_succeeded",
            user_id=user_id,
            username=username,
            **self._get_context_kwargs(),
        )

    def login_failed(self, username: str | None, reason: str) -> None:
        self._logger.warning(
            "login_failed",
            username=username,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def user_authenticated(self, user_id: int, username: str) -> None:
        self._logger.debug(
            "user_authenticated",
            user_id=user_id,
            username=username,
            **self._get_context_kwargs(),
        )

    def authentication_failed(self, reason: str) -> None:
        self._logger.warning(
            "authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )

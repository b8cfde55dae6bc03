"""Domain probe for application startup and lifecycle events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def application_starting(self, app_name: str, version: str) -> None:
        """Record that the application lifespan started."""
        ...

    def insecure_jwt_secret(self) -> None:
        """Record that tokens are signed with the documented default secret."""
        ...

    def database_ready(self) -> None:
        """Record that the store was verified and requests can be served."""
        ...

    def database_unavailable(self, error: str) -> None:
        """Record that the store could not be initialized (fatal)."""
        ...

    def application_stopped(self) -> None:
        """Record that shutdown finished and connections were released."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def application_starting(self, app_name: str, version: str) -> None:
        self._logger.info(
            "application_starting",
            app_name=app_name,
            version=version,
            **self._get_context_kwargs(),
        )

    def insecure_jwt_secret(self) -> None:
        self._logger.warning(
            "insecure_jwt_secret",
            hint="set AGROFIX_AUTH_JWT_SECRET before deploying",
            **self._get_context_kwargs(),
        )

    def database_ready(self) -> None:
        self._logger.info("database_ready", **self._get_context_kwargs())

    def database_unavailable(self, error: str) -> None:
        self._logger.critical(
            "database_unavailable",
            error=error,
            **self._get_context_kwargs(),
        )

    def application_stopped(self) -> None:
        self._logger.info("application_stopped", **self._get_context_kwargs())

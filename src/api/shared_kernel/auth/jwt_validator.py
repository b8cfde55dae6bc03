"""Bearer token issuing and validation.

Tokens are HS256-signed JWTs carrying ``userId`` and ``username`` plus
``iat``/``exp``. The server keeps no token state; a token is valid iff its
signature verifies, it has not expired, and its identity claims are well formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe

USER_ID_CLAIM = "userId"
USERNAME_CLAIM = "username"


@dataclass(frozen=True)
class TokenClaims:
    """Validated identity claims."""

    user_id: int
    username: str


class MissingTokenError(Exception):
    """Raised when a privileged request carries no bearer token."""

    pass


class InvalidTokenError(Exception):
    """Raised when JWT validation fails."""

    pass


class JWTIssuer:
    """Signs identity claims into bearer tokens."""

    def __init__(
        self,
        secret: str,
        probe: JWTValidatorProbe,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(minutes=60),
    ):
        """Initialize the issuer.

        Args:
            secret: HMAC signing key.
            probe: Observability probe for logging events.
            algorithm: JWS algorithm (default: HS256).
            ttl: Lifetime of issued tokens (default: 60 minutes).
        """
        self._secret = secret
        self._probe = probe
        self._algorithm = algorithm
        self._ttl = ttl

    def issue_token(self, user_id: int, username: str) -> str:
        """Issue a signed token for an authenticated user.

        Args:
            user_id: Store-assigned user id.
            username: The user's unique username.

        Returns:
            Compact JWS string.
        """
        now = datetime.now(tz=timezone.utc)
        claims: dict[str, Any] = {
            USER_ID_CLAIM: user_id,
            USERNAME_CLAIM: username,
            "iat": now,
            "exp": now + self._ttl,
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        self._probe.token_issued(user_id=str(user_id))
        return token


class JWTValidator:
    """Validates bearer tokens signed by ``JWTIssuer``.

    Verifies signature and expiry, then checks the identity claims.
    Any failure raises ``InvalidTokenError``; nothing is ever partially trusted.
    """

    def __init__(
        self,
        secret: str,
        probe: JWTValidatorProbe,
        algorithm: str = "HS256",
    ):
        """Initialize the JWT validator.

        Args:
            secret: HMAC key the tokens were signed with.
            probe: Observability probe for logging events.
            algorithm: The only JWS algorithm accepted (default: HS256).
        """
        self._secret = secret
        self._probe = probe
        self._algorithm = algorithm

    def validate_token(self, token: str) -> TokenClaims:
        """Validate JWT and return claims.

        Args:
            token: The JWT token string.

        Returns:
            TokenClaims containing the validated identity.

        Raises:
            InvalidTokenError: If token is malformed, wrongly signed, expired,
                or lacks well-formed identity claims.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_signature": True,
                    "verify_exp": True,
                    "verify_iat": True,
                    "verify_aud": False,
                    "require_exp": True,
                },
            )
        except ExpiredSignatureError as e:
            self._probe.token_validation_failed(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTClaimsError as e:
            self._probe.token_validation_failed(reason=f"Claims error: {e}")
            raise InvalidTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            error_msg = str(e).lower()
            if "signature" in error_msg:
                self._probe.token_validation_failed(reason="Invalid signature")
                raise InvalidTokenError("Invalid token signature") from e
            self._probe.token_validation_failed(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

        user_id = claims.get(USER_ID_CLAIM)
        # bool is an int subclass; reject it explicitly
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            self._probe.token_validation_failed(reason=f"Missing {USER_ID_CLAIM} claim")
            raise InvalidTokenError(f"Missing required claim: {USER_ID_CLAIM}")

        username = claims.get(USERNAME_CLAIM)
        if not isinstance(username, str) or not username:
            self._probe.token_validation_failed(reason=f"Missing {USERNAME_CLAIM} claim")
            raise InvalidTokenError(f"Missing required claim: {USERNAME_CLAIM}")

        self._probe.token_validated(user_id=str(user_id))

        return TokenClaims(user_id=user_id, username=username)

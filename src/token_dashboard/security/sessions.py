"""Signed, time-bound session credentials (JWT, HS256)."""
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

ALGORITHM = "HS256"


class InvalidSession(Exception):
    """Credential is malformed, expired, or signed with another key."""


class SessionClaims(BaseModel):
    """Identity asserted by a session credential."""

    user_id: str
    username: str
    issued_at: datetime
    expires_at: datetime


class SessionCodec:
    """Issues and verifies session JWTs.

    Claims on the wire: userId, username, iat, exp.
    """

    def __init__(self, secret: str, ttl: timedelta = timedelta(days=7)) -> None:
        """Initialize the codec.

        Args:
            secret: HMAC signing key.
            ttl: Validity of issued credentials.
        """
        self._secret = secret
        self._ttl = ttl

    def issue(self, user_id: str, username: str, *, now: datetime | None = None) -> str:
        """Sign a credential binding user_id and username, valid for ttl from now."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "username": username,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> SessionClaims:
        """Verify signature and expiry and return the claims.

        Raises:
            InvalidSession: On any verification failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
            return SessionClaims(
                user_id=payload["userId"],
                username=payload["username"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidSession(str(exc)) from exc
        except (KeyError, TypeError, ValidationError) as exc:
            raise InvalidSession(f"Malformed session claims: {exc}") from exc

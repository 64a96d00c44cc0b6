"""Password hashing, session credentials and recovery phrases."""
from token_dashboard.security.passwords import PasswordHasher
from token_dashboard.security.recovery import generate_recovery_phrase
from token_dashboard.security.sessions import (InvalidSession, SessionClaims,
                                               SessionCodec)

__all__ = [
    "InvalidSession",
    "PasswordHasher",
    "SessionClaims",
    "SessionCodec",
    "generate_recovery_phrase",
]

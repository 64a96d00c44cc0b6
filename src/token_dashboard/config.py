"""Runtime settings read from the environment."""
import os
from datetime import timedelta

from pydantic import BaseModel, Field

DEFAULT_JWT_SECRET = "your-secret-key"


def _split_csv(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


class Settings(BaseModel):
    """Application settings. Build from the process environment with from_env()."""

    jwt_secret: str = DEFAULT_JWT_SECRET
    session_ttl_days: float = Field(default=7.0, gt=0)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    host: str = "127.0.0.1"
    port: int = 4000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(days=self.session_ttl_days)

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

    @classmethod
    def from_env(cls) -> "Settings":
        """Read JWT_SECRET, SESSION_TTL_DAYS, BCRYPT_ROUNDS, HOST, PORT, CORS_ORIGINS, LOG_LEVEL."""
        return cls(
            jwt_secret=os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET),
            session_ttl_days=float(os.getenv("SESSION_TTL_DAYS", "7")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "4000")),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

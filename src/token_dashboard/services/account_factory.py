"""Factory for building an AccountService from settings."""
from token_dashboard.config import Settings
from token_dashboard.providers import TokenProviderABC
from token_dashboard.security import PasswordHasher, SessionCodec
from token_dashboard.services.account_service import AccountService
from token_dashboard.store import AccountStore


def create_account_service(
    settings: Settings,
    catalog: TokenProviderABC,
    *,
    store: AccountStore | None = None,
) -> AccountService:
    """Create an AccountService with hashing and session config from settings.

    Args:
        settings: Supplies the JWT secret, session TTL and bcrypt cost.
        catalog: Token catalog used to price portfolio lines.
        store: Existing store to reuse; a fresh empty one by default.

    Returns:
        A configured AccountService instance.
    """
    return AccountService(
        store if store is not None else AccountStore(),
        catalog,
        PasswordHasher(rounds=settings.bcrypt_rounds),
        SessionCodec(settings.jwt_secret, ttl=settings.session_ttl),
    )

"""Process-local account storage."""
from token_dashboard.store.account_store import AccountStore

__all__ = ["AccountStore"]

"""Service layer: account orchestration over the store and token catalog."""
from token_dashboard.services.account_factory import create_account_service
from token_dashboard.services.account_service import AccountService

__all__ = [
    "AccountService",
    "create_account_service",
]

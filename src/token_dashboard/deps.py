"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

Lifespan (main.py) creates the token catalog and account service once and
attaches them to app.state; these getters are used by Depends().
"""
from typing import Annotated

from fastapi import Depends, Request

from token_dashboard.providers import TokenProviderABC
from token_dashboard.services import AccountService


def get_token_catalog(request: Request) -> TokenProviderABC:
    """Resolve the token catalog from app.state (created at startup)."""
    return request.app.state.token_catalog


def get_account_service(request: Request) -> AccountService:
    """Resolve the AccountService from app.state."""
    return request.app.state.account_service


# Type aliases for route injection
TokenCatalogDep = Annotated[TokenProviderABC, Depends(get_token_catalog)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]

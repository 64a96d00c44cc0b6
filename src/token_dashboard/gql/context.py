"""Per-request GraphQL context: collaborators plus the resolved caller."""
from typing import Annotated

from fastapi import Header
from strawberry.fastapi import BaseContext

from token_dashboard.deps import AccountServiceDep, TokenCatalogDep
from token_dashboard.providers import TokenProviderABC
from token_dashboard.schemas import AccountView
from token_dashboard.services import AccountService

BEARER_SCHEME = "bearer"


def parse_bearer(authorization: str | None) -> str | None:
    """Extract the credential from an Authorization header value.

    Accepts "Bearer <token>" (any case) or a bare token.
    """
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        value = rest.strip()
    return value or None


class GraphQLContext(BaseContext):
    """Context passed to every resolver as info.context."""

    def __init__(
        self,
        catalog: TokenProviderABC,
        accounts: AccountService,
        caller: AccountView | None,
    ) -> None:
        super().__init__()
        self.catalog = catalog
        self.accounts = accounts
        self.caller = caller


async def get_context(
    catalog: TokenCatalogDep,
    accounts: AccountServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> GraphQLContext:
    """Build the context; an invalid or missing credential yields an anonymous caller."""
    caller = accounts.resolve_session(parse_bearer(authorization))
    return GraphQLContext(catalog=catalog, accounts=accounts, caller=caller)

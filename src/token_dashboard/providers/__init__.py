"""Token catalog providers.

- TokenProviderABC: read-only catalog interface (list_tokens, get_token)
- MockTokenProvider: fixed in-memory list seeded at startup

Example:
    catalog = MockTokenProvider()
    sol = catalog.get_token("1")
    print(f"{sol.symbol}: ${sol.price}")
"""
from token_dashboard.providers.mock import MOCK_TOKENS, MockTokenProvider
from token_dashboard.providers.token_provider_abc import TokenProviderABC

__all__ = [
    "MOCK_TOKENS",
    "MockTokenProvider",
    "TokenProviderABC",
]

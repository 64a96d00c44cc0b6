"""In-memory token catalog seeded at startup."""
from collections.abc import Iterable

from token_dashboard.providers.mock.seed import MOCK_TOKENS
from token_dashboard.providers.token_provider_abc import TokenProviderABC
from token_dashboard.schemas import TokenRecord


class MockTokenProvider(TokenProviderABC):
    """Serves a fixed list of tokens. Nothing is fetched and nothing changes."""

    def __init__(self, tokens: Iterable[TokenRecord] = MOCK_TOKENS) -> None:
        """Initialize the catalog.

        Args:
            tokens: Records to serve, in display order. Defaults to the built-in seed.

        Raises:
            ValueError: If two records share an id.
        """
        self._tokens: tuple[TokenRecord, ...] = tuple(tokens)
        ids = [token.id for token in self._tokens]
        if len(set(ids)) != len(ids):
            raise ValueError("Token ids must be unique")

    def list_tokens(self) -> list[TokenRecord]:
        return list(self._tokens)

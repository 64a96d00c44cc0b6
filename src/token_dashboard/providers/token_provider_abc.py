"""Abstract base class for token catalog providers."""
from abc import ABC, abstractmethod

from token_dashboard.schemas import TokenRecord


class TokenProviderABC(ABC):
    """Base interface for token catalogs.

    A provider serves a read-only list of TokenRecords. Lookups never raise for
    unknown ids; they return None so callers decide what "missing" means.
    """

    @abstractmethod
    def list_tokens(self) -> list[TokenRecord]:
        """Return every token in a stable (insertion) order."""

    def get_token(self, token_id: str) -> TokenRecord | None:
        """Return the token with the given id, or None.

        Default implementation scans list_tokens(); fine for small catalogs.
        """
        for token in self.list_tokens():
            if token.id == token_id:
                return token
        return None

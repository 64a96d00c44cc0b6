"""Mapping of account errors to GraphQL errors."""
from dataclasses import dataclass

from graphql import GraphQLError

from token_dashboard.errors import AccountError, AccountErrorKind

ERROR_CODES = frozenset(kind.value for kind in AccountErrorKind)


@dataclass(frozen=True)
class AccountErrorMapper:
    """Maps AccountError to a GraphQLError carrying extensions.code.

    The message stays human-readable; clients branch on the code.
    """

    code_key: str = "code"

    def to_graphql(self, exc: AccountError) -> GraphQLError:
        return GraphQLError(exc.message, extensions={self.code_key: exc.kind.value})

    def raise_graphql(self, exc: AccountError) -> None:
        """Map an AccountError and raise the GraphQLError. Never returns."""
        raise self.to_graphql(exc) from exc

    def is_mapped(self, error: GraphQLError) -> bool:
        """True if error came from an AccountError (an expected, user-facing failure)."""
        return (error.extensions or {}).get(self.code_key) in ERROR_CODES

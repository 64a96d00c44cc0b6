"""GraphQL schema, types and request context."""
from token_dashboard.gql.context import GraphQLContext, get_context, parse_bearer
from token_dashboard.gql.error_mapper import AccountErrorMapper
from token_dashboard.gql.schema import schema

__all__ = [
    "AccountErrorMapper",
    "GraphQLContext",
    "get_context",
    "parse_bearer",
    "schema",
]

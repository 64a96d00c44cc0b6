"""GraphQL route (/graphql): queries and mutations for tokens and portfolios."""
from strawberry.fastapi import GraphQLRouter

from token_dashboard.gql import get_context, schema

router = GraphQLRouter(schema, context_getter=get_context)

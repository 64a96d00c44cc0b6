"""API routers.

Includes routes for:
- /graphql - Token catalog queries and account/portfolio mutations
"""
from token_dashboard.routers.gql_router import router as graphql_router

__all__ = ["graphql_router"]

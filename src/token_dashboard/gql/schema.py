"""GraphQL schema: token queries and account/portfolio mutations."""
import logging

import strawberry
from graphql import GraphQLError
from starlette.concurrency import run_in_threadpool
from strawberry.types import ExecutionContext, Info

from token_dashboard.errors import AccountError
from token_dashboard.gql.error_mapper import AccountErrorMapper
from token_dashboard.gql.types import (AuthPayloadType, TokenType,
                                       UserType)

logger = logging.getLogger(__name__)

error_mapper = AccountErrorMapper()


@strawberry.type
class Query:
    @strawberry.field(description="All tokens in catalog order.")
    def tokens(self, info: Info) -> list[TokenType]:
        return [TokenType.from_record(t) for t in info.context.catalog.list_tokens()]

    @strawberry.field(description="One token by id; null if unknown.")
    def token(self, info: Info, id: strawberry.ID) -> TokenType | None:  # pylint: disable=redefined-builtin
        record = info.context.catalog.get_token(str(id))
        return TokenType.from_record(record) if record is not None else None

    @strawberry.field(description="The authenticated caller; null when anonymous.")
    def me(self, info: Info) -> UserType | None:
        view = info.context.accounts.me(info.context.caller)
        return UserType.from_view(view) if view is not None else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def register(self, info: Info, username: str, password: str) -> AuthPayloadType:
        # bcrypt is slow on purpose; keep it off the event loop.
        try:
            payload = await run_in_threadpool(info.context.accounts.register, username, password)
        except AccountError as e:
            error_mapper.raise_graphql(e)
        return AuthPayloadType.from_payload(payload)

    @strawberry.mutation
    async def login(self, info: Info, username: str, password: str) -> AuthPayloadType:
        try:
            payload = await run_in_threadpool(
                info.context.accounts.authenticate, username, password
            )
        except AccountError as e:
            error_mapper.raise_graphql(e)
        return AuthPayloadType.from_payload(payload)

    @strawberry.mutation
    def add_to_portfolio(self, info: Info, token_id: strawberry.ID, amount: float) -> UserType:
        try:
            view = info.context.accounts.add_to_portfolio(
                info.context.caller, str(token_id), amount
            )
        except AccountError as e:
            error_mapper.raise_graphql(e)
        return UserType.from_view(view)

    @strawberry.mutation
    def remove_from_portfolio(self, info: Info, token_id: strawberry.ID) -> UserType:
        try:
            view = info.context.accounts.remove_from_portfolio(info.context.caller, str(token_id))
        except AccountError as e:
            error_mapper.raise_graphql(e)
        return UserType.from_view(view)


class DashboardSchema(strawberry.Schema):
    """Schema that only logs unexpected errors; mapped account errors are user-facing."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        unexpected = [e for e in errors if not error_mapper.is_mapped(e)]
        if unexpected:
            super().process_errors(unexpected, execution_context)
        for error in errors:
            if error_mapper.is_mapped(error):
                logger.debug("GraphQL request failed: %s", error.message)


schema = DashboardSchema(query=Query, mutation=Mutation)

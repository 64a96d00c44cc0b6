"""GraphQL object types. Field names are exposed in camelCase."""
import strawberry

from token_dashboard.schemas import (AccountView, AuthPayload, PortfolioItem,
                                     TokenRecord)


@strawberry.type(name="Token")
class TokenType:
    id: strawberry.ID
    name: str
    symbol: str
    price: float
    price_change_24h: float
    volume_30min: float
    liquidity: float
    market_cap: float

    @classmethod
    def from_record(cls, record: TokenRecord) -> "TokenType":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            symbol=record.symbol,
            price=record.price,
            price_change_24h=record.price_change_24h,
            volume_30min=record.volume_30min,
            liquidity=record.liquidity,
            market_cap=record.market_cap,
        )


@strawberry.type(name="PortfolioItem")
class PortfolioItemType:
    token_id: strawberry.ID
    symbol: str
    amount: float
    value: float = strawberry.field(
        description="amount x token price at the last mutation (not live)"
    )

    @classmethod
    def from_item(cls, item: PortfolioItem) -> "PortfolioItemType":
        return cls(
            token_id=strawberry.ID(item.token_id),
            symbol=item.symbol,
            amount=item.amount,
            value=item.value,
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    username: str
    recovery_phrase: str
    portfolio: list[PortfolioItemType]

    @classmethod
    def from_view(cls, view: AccountView) -> "UserType":
        return cls(
            id=strawberry.ID(view.id),
            username=view.username,
            recovery_phrase=view.recovery_phrase,
            portfolio=[PortfolioItemType.from_item(item) for item in view.portfolio],
        )


@strawberry.type(name="AuthPayload")
class AuthPayloadType:
    token: str
    user: UserType

    @classmethod
    def from_payload(cls, payload: AuthPayload) -> "AuthPayloadType":
        return cls(token=payload.token, user=UserType.from_view(payload.user))

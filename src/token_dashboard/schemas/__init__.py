"""Pydantic models for tokens, accounts and portfolios. Not persisted."""
from pydantic import BaseModel, Field


class TokenRecord(BaseModel):
    """One tradable asset in the mock catalog."""

    id: str
    name: str
    symbol: str
    price: float
    price_change_24h: float
    volume_30min: float  # trailing volume
    liquidity: float
    market_cap: float

    model_config = {"frozen": True}


class PortfolioItem(BaseModel):
    """One holding line. value is a snapshot taken at the last mutation."""

    token_id: str
    symbol: str
    amount: float
    value: float


class Account(BaseModel):
    """Stored account, including the password hash. Never leaves the service layer."""

    id: str
    username: str
    password_hash: str
    recovery_phrase: str
    portfolio: list[PortfolioItem] = Field(default_factory=list)


class AccountView(BaseModel):
    """Public projection of an Account (no password hash)."""

    id: str
    username: str
    recovery_phrase: str
    portfolio: list[PortfolioItem] = Field(default_factory=list)

    @classmethod
    def from_account(cls, account: Account) -> "AccountView":
        return cls(
            id=account.id,
            username=account.username,
            recovery_phrase=account.recovery_phrase,
            portfolio=[item.model_copy() for item in account.portfolio],
        )


class AuthPayload(BaseModel):
    """Session token plus the account it was issued for."""

    token: str
    user: AccountView


__all__ = ["Account", "AccountView", "AuthPayload", "PortfolioItem", "TokenRecord"]

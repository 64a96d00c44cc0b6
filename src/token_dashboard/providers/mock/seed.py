"""Seed data for the mock token catalog."""
from token_dashboard.schemas import TokenRecord

MOCK_TOKENS: tuple[TokenRecord, ...] = (
    TokenRecord(
        id="1",
        name="Solana",
        symbol="SOL",
        price=98.45,
        price_change_24h=5.23,
        volume_30min=1_250_000,
        liquidity=45_000_000,
        market_cap=45_000_000_000,
    ),
    TokenRecord(
        id="2",
        name="Raydium",
        symbol="RAY",
        price=0.85,
        price_change_24h=-2.15,
        volume_30min=850_000,
        liquidity=12_000_000,
        market_cap=8_500_000_000,
    ),
    TokenRecord(
        id="3",
        name="Serum",
        symbol="SRM",
        price=0.12,
        price_change_24h=8.45,
        volume_30min=320_000,
        liquidity=8_000_000,
        market_cap=3_200_000_000,
    ),
    TokenRecord(
        id="4",
        name="Bonk",
        symbol="BONK",
        price=0.0000234,
        price_change_24h=12.34,
        volume_30min=450_000,
        liquidity=1_500_000,
        market_cap=2_340_000_000,
    ),
    TokenRecord(
        id="5",
        name="Jupiter",
        symbol="JUP",
        price=0.67,
        price_change_24h=-1.23,
        volume_30min=680_000,
        liquidity=9_500_000,
        market_cap=6_700_000_000,
    ),
)

"""Mock token catalog."""
from token_dashboard.providers.mock.mock_token_provider import MockTokenProvider
from token_dashboard.providers.mock.seed import MOCK_TOKENS

__all__ = ["MOCK_TOKENS", "MockTokenProvider"]

"""In-memory account store keyed by username."""
import threading

from token_dashboard.errors import AccountError, AccountErrorKind
from token_dashboard.schemas import Account, PortfolioItem, TokenRecord


class AccountStore:
    """Mapping of username -> Account guarded by a single lock.

    Every read returns a deep copy so callers never hold references into the
    map outside the lock. Lookups are case-sensitive exact matches.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._accounts: dict[str, Account] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._accounts

    def add(self, account: Account) -> None:
        """Insert a new account.

        Raises:
            AccountError: DUPLICATE_USERNAME if the username is taken.
        """
        with self._lock:
            if account.username in self._accounts:
                raise AccountError(AccountErrorKind.DUPLICATE_USERNAME)
            self._accounts[account.username] = account.model_copy(deep=True)

    def get(self, username: str) -> Account | None:
        """Return a copy of the account, or None if absent."""
        with self._lock:
            account = self._accounts.get(username)
            return account.model_copy(deep=True) if account is not None else None

    def upsert_item(self, username: str, token: TokenRecord, amount: float) -> Account:
        """Add amount of token to the account's portfolio.

        An existing line for the token accumulates the amount; otherwise a new
        line is appended. value is recomputed as cumulative amount x token.price.

        Returns:
            A copy of the updated account.

        Raises:
            AccountError: NOT_FOUND if the username is absent.
        """
        with self._lock:
            account = self._require(username)
            item = next((i for i in account.portfolio if i.token_id == token.id), None)
            if item is None:
                account.portfolio.append(
                    PortfolioItem(
                        token_id=token.id,
                        symbol=token.symbol,
                        amount=amount,
                        value=amount * token.price,
                    )
                )
            else:
                item.amount += amount
                item.value = item.amount * token.price
            return account.model_copy(deep=True)

    def remove_item(self, username: str, token_id: str) -> Account:
        """Drop the line for token_id if present (no-op otherwise).

        Raises:
            AccountError: NOT_FOUND if the username is absent.
        """
        with self._lock:
            account = self._require(username)
            account.portfolio = [i for i in account.portfolio if i.token_id != token_id]
            return account.model_copy(deep=True)

    def _require(self, username: str) -> Account:
        account = self._accounts.get(username)
        if account is None:
            raise AccountError(AccountErrorKind.NOT_FOUND)
        return account

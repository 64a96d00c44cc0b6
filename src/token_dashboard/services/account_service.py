"""Account service: registration, login, session resolution and portfolio edits.

AccountService wires the account store to the token catalog, the password
hasher, the session codec and the recovery-phrase generator. All failures are
AccountError with a kind from AccountErrorKind; the API layer maps them.
"""
import logging
import math
import uuid
from collections.abc import Callable

from token_dashboard.errors import AccountError, AccountErrorKind
from token_dashboard.providers import TokenProviderABC
from token_dashboard.schemas import Account, AccountView, AuthPayload
from token_dashboard.security import (InvalidSession, PasswordHasher,
                                      SessionCodec, generate_recovery_phrase)
from token_dashboard.store import AccountStore

logger = logging.getLogger(__name__)


class AccountService:
    """Account and portfolio operations over an injected store and catalog."""

    def __init__(
        self,
        store: AccountStore,
        catalog: TokenProviderABC,
        hasher: PasswordHasher,
        sessions: SessionCodec,
        *,
        phrase_generator: Callable[[], str] = generate_recovery_phrase,
    ) -> None:
        """Initialize with collaborators.

        Args:
            store: Account storage (owns the lock).
            catalog: Token catalog used to resolve token ids and prices.
            hasher: Password hasher (bcrypt).
            sessions: Session credential codec (JWT).
            phrase_generator: Recovery phrase factory; 24-word mnemonic by default.
        """
        self._store = store
        self._catalog = catalog
        self._hasher = hasher
        self._sessions = sessions
        self._generate_phrase = phrase_generator

    def register(self, username: str, password: str) -> AuthPayload:
        """Create an account and open a session for it.

        The response includes the recovery phrase; clients must show it once
        and never log it.

        Raises:
            AccountError: DUPLICATE_USERNAME if the username is taken.
        """
        if username in self._store:
            raise AccountError(AccountErrorKind.DUPLICATE_USERNAME)

        account = Account(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=self._hasher.hash(password),
            recovery_phrase=self._generate_phrase(),
        )
        # Re-checked under the store lock; a concurrent register still loses here.
        self._store.add(account)
        logger.info("Registered account %s (%s)", username, account.id)
        return self._auth_payload(account)

    def authenticate(self, username: str, password: str) -> AuthPayload:
        """Check credentials and issue a fresh session.

        Raises:
            AccountError: NOT_FOUND for an unknown username,
                INVALID_CREDENTIAL for a wrong password.
        """
        account = self._store.get(username)
        if account is None:
            logger.warning("Login for unknown user %s", username)
            raise AccountError(AccountErrorKind.NOT_FOUND)
        if not self._hasher.verify(password, account.password_hash):
            logger.warning("Invalid password for user %s", username)
            raise AccountError(AccountErrorKind.INVALID_CREDENTIAL)
        logger.info("User %s logged in", username)
        return self._auth_payload(account)

    def resolve_session(self, credential: str | None) -> AccountView | None:
        """Resolve a session credential to the caller's account.

        Any failure (missing, malformed, expired, bad signature, unknown or
        re-registered user) resolves to None, i.e. an anonymous caller.
        """
        if not credential:
            return None
        try:
            claims = self._sessions.decode(credential)
        except InvalidSession as exc:
            logger.debug("Ignoring invalid session credential: %s", exc)
            return None
        account = self._store.get(claims.username)
        if account is None or account.id != claims.user_id:
            logger.debug("Session for %s does not match a stored account", claims.username)
            return None
        return AccountView.from_account(account)

    def me(self, caller: AccountView | None) -> AccountView | None:
        """Current state of the caller's account, or None when anonymous."""
        if caller is None:
            return None
        account = self._store.get(caller.username)
        return AccountView.from_account(account) if account is not None else None

    def add_to_portfolio(
        self, caller: AccountView | None, token_id: str, amount: float
    ) -> AccountView:
        """Add amount of a token to the caller's portfolio.

        Raises:
            AccountError: UNAUTHENTICATED without a caller, TOKEN_NOT_FOUND for
                an unknown token, INVALID_AMOUNT for a non-positive or
                non-finite amount.
        """
        username = self._require_caller(caller)
        token = self._catalog.get_token(token_id)
        if token is None:
            raise AccountError(AccountErrorKind.TOKEN_NOT_FOUND)
        if not math.isfinite(amount) or amount <= 0:
            raise AccountError(AccountErrorKind.INVALID_AMOUNT)
        account = self._store.upsert_item(username, token, amount)
        logger.info("User %s added %s %s", username, amount, token.symbol)
        return AccountView.from_account(account)

    def remove_from_portfolio(self, caller: AccountView | None, token_id: str) -> AccountView:
        """Remove a token's line from the caller's portfolio; absent lines are a no-op.

        Raises:
            AccountError: UNAUTHENTICATED without a caller.
        """
        username = self._require_caller(caller)
        account = self._store.remove_item(username, token_id)
        logger.info("User %s removed token %s", username, token_id)
        return AccountView.from_account(account)

    def _require_caller(self, caller: AccountView | None) -> str:
        if caller is None:
            raise AccountError(AccountErrorKind.UNAUTHENTICATED)
        return caller.username

    def _auth_payload(self, account: Account) -> AuthPayload:
        token = self._sessions.issue(account.id, account.username)
        return AuthPayload(token=token, user=AccountView.from_account(account))

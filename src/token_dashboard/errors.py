"""Closed set of account/portfolio failures."""
from enum import Enum


class AccountErrorKind(str, Enum):
    """Every way an account or portfolio operation can fail."""

    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"


DEFAULT_MESSAGES: dict[AccountErrorKind, str] = {
    AccountErrorKind.DUPLICATE_USERNAME: "Username already exists",
    AccountErrorKind.NOT_FOUND: "User not found",
    AccountErrorKind.INVALID_CREDENTIAL: "Invalid password",
    AccountErrorKind.UNAUTHENTICATED: "Not authenticated",
    AccountErrorKind.TOKEN_NOT_FOUND: "Token not found",
    AccountErrorKind.INVALID_AMOUNT: "Amount must be a positive number",
}


class AccountError(Exception):
    """Raised by the account store and service; carries a machine-readable kind."""

    def __init__(self, kind: AccountErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"AccountError({self.kind.value}, {self.message!r})"

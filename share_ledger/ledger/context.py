"""Explicit ledger state passed to every component."""

from dataclasses import dataclass, field

from share_ledger.auth import Authorizer
from share_ledger.clock import Clock
from share_ledger.config import LedgerConfig
from share_ledger.exceptions import (
    InvalidOperationError,
    InvalidShareAmountError,
    NotInitializedError,
)
from share_ledger.store.keyed import KeyedStore
from share_ledger.store.repositories import Repositories

U64_MAX = 2**64 - 1


@dataclass
class LedgerContext:
    """Store, collaborators and behaviour switches for one ledger."""

    store: KeyedStore
    authorizer: Authorizer
    clock: Clock
    config: LedgerConfig = field(default_factory=LedgerConfig)
    repos: Repositories = field(init=False)

    def __post_init__(self) -> None:
        self.repos = Repositories(self.store)

    def require_admin(self) -> str:
        """Return the administrator identity, failing when uninitialized."""
        admin = self.repos.state.get_admin()
        if admin is None:
            raise NotInitializedError("Ledger has not been initialized")
        return admin

    def require_initialized(self) -> None:
        if not self.repos.state.is_initialized():
            raise NotInitializedError("Ledger has not been initialized")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_share_amount(shares: int) -> None:
    """Share amounts are whole numbers in 1..2**64-1."""
    if not _is_int(shares) or not 0 < shares <= U64_MAX:
        raise InvalidShareAmountError(
            f"Share amount must be an integer between 1 and {U64_MAX}, got {shares!r}"
        )


def validate_balance(balance: int) -> None:
    """A resulting balance must still fit an unsigned 64-bit count."""
    if balance > U64_MAX:
        raise InvalidShareAmountError(f"Balance of {balance} shares exceeds {U64_MAX}")


def validate_u64_field(name: str, value: int) -> None:
    """Registered counts and prices are whole numbers in 0..2**64-1."""
    if not _is_int(value) or not 0 <= value <= U64_MAX:
        raise InvalidOperationError(f"{name} must be an integer between 0 and {U64_MAX}, got {value!r}")

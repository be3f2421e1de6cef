"""Identity authorization for ledger operations."""

import logging
from typing import Iterable, Protocol

from share_ledger.exceptions import NotAuthorizedError

logger = logging.getLogger(__name__)


class Authorizer(Protocol):
    """Checks that the caller controls an identity.

    Implementations must raise ``NotAuthorizedError`` when the proof is
    missing and must never default to allowing the call.
    """

    def require_authorization(self, identity: str) -> None:
        ...


class IdentityAuthorizer:
    """Authorizer backed by the set of identities that proved control.

    The host verifies signatures (or any other proof) and calls
    :meth:`prove` for each identity the current caller controls.
    """

    def __init__(self, proven: Iterable[str] = ()) -> None:
        self._proven: set[str] = set(proven)

    def prove(self, *identities: str) -> None:
        self._proven.update(identities)

    def revoke(self, *identities: str) -> None:
        for identity in identities:
            self._proven.discard(identity)

    def is_proven(self, identity: str) -> bool:
        return identity in self._proven

    def require_authorization(self, identity: str) -> None:
        if identity not in self._proven:
            logger.warning("Authorization denied for %s", identity)
            raise NotAuthorizedError(identity)

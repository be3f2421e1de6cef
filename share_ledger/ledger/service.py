"""Public operation surface of the ownership ledger."""

import logging
from dataclasses import asdict
from typing import Iterable

from share_ledger.auth import Authorizer, IdentityAuthorizer
from share_ledger.clock import Clock, SystemClock
from share_ledger.config import EventsConfig, LedgerConfig
from share_ledger.exceptions import AlreadyInitializedError, LedgerError
from share_ledger.ledger.catalog import PropertyCatalog
from share_ledger.ledger.context import LedgerContext
from share_ledger.ledger.events import EventPublisher, Sink
from share_ledger.ledger.ownership import OwnershipLedger
from share_ledger.ledger.query import QueryFacade
from share_ledger.ledger.stats import StatsAggregator
from share_ledger.models import (
    LedgerEventType,
    LedgerStats,
    OwnershipShare,
    Property,
    PropertyDetails,
)
from share_ledger.store.keyed import InMemoryKeyedStore, KeyedStore

logger = logging.getLogger(__name__)


class RealEstateLedger:
    """Fractional ownership ledger for registered properties.

    Each mutating call is one transaction against the keyed store: all
    checks run before the first write, any raised ``LedgerError`` rolls
    the store back, and the storage lease is renewed before commit.
    The mutation's event is written to every sink inside the same
    transaction, so a sink failure rolls the change back and the call
    can be retried.

    Parameters
    ----------
    store : KeyedStore | None
        Backing store (default: a fresh in-memory store).
    authorizer : Authorizer | None
        Identity proof checker (default: an IdentityAuthorizer with no
        proven identities, which rejects every mutation).
    clock : Clock | None
        Timestamp source (default: SystemClock).
    config : LedgerConfig | None
        Lease window and behaviour switches.
    sinks : Iterable[Sink]
        Event sinks receiving committed mutations.
    events : EventsConfig | None
        Topic naming for published events.
    """

    def __init__(
        self,
        store: KeyedStore | None = None,
        authorizer: Authorizer | None = None,
        clock: Clock | None = None,
        config: LedgerConfig | None = None,
        sinks: Iterable[Sink] = (),
        events: EventsConfig | None = None,
    ) -> None:
        self.context = LedgerContext(
            store=store if store is not None else InMemoryKeyedStore(),
            authorizer=authorizer if authorizer is not None else IdentityAuthorizer(),
            clock=clock if clock is not None else SystemClock(),
            config=config or LedgerConfig(),
        )
        self.stats = StatsAggregator(self.context.repos.stats)
        self.catalog = PropertyCatalog(self.context, self.stats)
        self.ownership = OwnershipLedger(self.context, self.catalog, self.stats)
        self.query = QueryFacade(self.context, self.catalog, self.ownership, self.stats)
        self.publisher = EventPublisher(sinks, events)

    @property
    def store(self) -> KeyedStore:
        return self.context.store

    @property
    def is_initialized(self) -> bool:
        return self.context.repos.state.is_initialized()

    def _commit(self) -> None:
        self.context.store.extend_lease(self.context.config.lease_window)

    # Mutations

    def initialize(self, admin: str) -> None:
        """Set the administrator and zero the counters; allowed once."""
        repos = self.context.repos
        with self.context.store.transaction():
            if repos.state.is_initialized():
                raise AlreadyInitializedError("Ledger already initialized")
            repos.state.set_admin(admin)
            repos.state.set_counter(0)
            self.stats.reset()
            self.publisher.publish(
                LedgerEventType.LEDGER_INITIALIZED,
                "ledger",
                {"admin": admin},
                self.context.clock.now(),
            )
            self._commit()

        logger.info("Ledger initialized with admin %s", admin, extra={"admin": admin})

    def register_property(
        self,
        title: str,
        location: str,
        description: str,
        total_shares: int,
        price_per_share: int,
        image_url: str = "",
    ) -> int:
        """Register a new unverified property and return its id."""
        details = PropertyDetails(
            title=title,
            location=location,
            description=description,
            total_shares=total_shares,
            price_per_share=price_per_share,
            image_url=image_url,
        )
        try:
            with self.context.store.transaction():
                self.context.require_initialized()
                prop = self.catalog.register(details)
                self.publisher.publish(
                    LedgerEventType.PROPERTY_REGISTERED,
                    str(prop.property_id),
                    asdict(prop),
                    prop.registered_at,
                )
                self._commit()
        except LedgerError as exc:
            logger.warning("Registration of %r rejected: %s", title, exc)
            raise

        logger.info(
            "New property registered with ID: %d",
            prop.property_id,
            extra={"property_id": prop.property_id, "title": prop.title},
        )
        return prop.property_id

    def verify_property(self, property_id: int, caller: str | None = None) -> None:
        """Verify a property; requires the administrator's authorization."""
        try:
            with self.context.store.transaction():
                self.catalog.verify(property_id, caller)
                self.publisher.publish(
                    LedgerEventType.PROPERTY_VERIFIED,
                    str(property_id),
                    {"property_id": property_id},
                    self.context.clock.now(),
                )
                self._commit()
        except LedgerError as exc:
            logger.warning("Verification of property %s rejected: %s", property_id, exc)
            raise

        logger.info("Property ID: %d is now verified", property_id, extra={"property_id": property_id})

    def purchase_shares(self, property_id: int, shares: int, buyer: str) -> OwnershipShare:
        """Buy shares of a verified property; requires the buyer's authorization."""
        try:
            with self.context.store.transaction():
                self.context.require_initialized()
                holding = self.ownership.purchase(property_id, shares, buyer)
                self.publisher.publish(
                    LedgerEventType.SHARES_PURCHASED,
                    str(property_id),
                    {
                        "property_id": property_id,
                        "buyer": buyer,
                        "shares": shares,
                        "balance": holding.shares,
                    },
                    holding.last_changed_at,
                )
                self._commit()
        except LedgerError as exc:
            logger.warning("Purchase of %s shares of property %s by %s rejected: %s",
                           shares, property_id, buyer, exc)
            raise

        logger.info(
            "Address %s purchased %d shares of property %d",
            buyer,
            shares,
            property_id,
            extra={"property_id": property_id, "owner": buyer, "shares": shares},
        )
        return holding

    def transfer_shares(
        self,
        property_id: int,
        sender: str,
        recipient: str,
        shares: int,
    ) -> tuple[OwnershipShare, OwnershipShare]:
        """Move shares between identities; requires the sender's authorization."""
        try:
            with self.context.store.transaction():
                self.context.require_initialized()
                source, target = self.ownership.transfer(property_id, sender, recipient, shares)
                self.publisher.publish(
                    LedgerEventType.SHARES_TRANSFERRED,
                    str(property_id),
                    {
                        "property_id": property_id,
                        "sender": sender,
                        "recipient": recipient,
                        "shares": shares,
                        "sender_balance": source.shares,
                        "recipient_balance": target.shares,
                    },
                    target.last_changed_at,
                )
                self._commit()
        except LedgerError as exc:
            logger.warning("Transfer of %s shares of property %s from %s to %s rejected: %s",
                           shares, property_id, sender, recipient, exc)
            raise

        logger.info("%s transferred %d shares of property %d to %s",
                    sender, shares, property_id, recipient)
        return source, target

    # Queries

    def get_property(self, property_id: int) -> Property:
        return self.query.get_property(property_id)

    def get_ownership(self, property_id: int, owner: str) -> OwnershipShare:
        return self.query.get_ownership(property_id, owner)

    def get_user_properties(self, owner: str) -> list[int]:
        return self.query.user_properties(owner)

    def get_stats(self) -> LedgerStats:
        return self.query.get_stats()

    def get_total_shares_owned(self, owner: str) -> int:
        return self.query.total_shares_owned(owner)

    def list_properties(self, start_index: int, limit: int) -> list[Property]:
        return self.query.list_properties(start_index, limit)

    def get_available_shares(self, property_id: int) -> int:
        return self.query.available_shares(property_id)

    def get_portfolio(self, owner: str) -> list[OwnershipShare]:
        return self.query.portfolio(owner)

    def close(self) -> None:
        """Close every event sink."""
        self.publisher.close()

"""Marketplace scenario driving a ledger through a realistic trading history."""

import logging
import random
from dataclasses import asdict
from typing import Any, Iterable

from share_ledger.auth import IdentityAuthorizer
from share_ledger.clock import ManualClock
from share_ledger.config import EventsConfig, LedgerConfig
from share_ledger.generators import IdentityGenerator, PropertyGenerator
from share_ledger.ledger import RealEstateLedger
from share_ledger.ledger.events import Sink
from share_ledger.store.keyed import InMemoryKeyedStore, KeyedStore

logger = logging.getLogger(__name__)


class MarketplaceScenario:
    """Register, verify and trade fractional shares of sample properties.

    The scenario creates an administrator and a pool of investors, registers
    properties, verifies a fraction of them, lets each investor buy into
    random verified properties within the remaining supply and finally moves
    shares between investors.
    """

    def __init__(
        self,
        num_properties: int = 10,
        num_investors: int = 25,
        verification_rate: float = 0.8,
        purchases_per_investor: tuple[int, int] = (1, 4),
        transfer_rate: float = 0.3,
        seed: int | None = None,
        store: KeyedStore | None = None,
        config: LedgerConfig | None = None,
        sinks: Iterable[Sink] = (),
        events: EventsConfig | None = None,
    ) -> None:
        """Initialize marketplace scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to register.
        num_investors : int
            Number of investor identities.
        verification_rate : float
            Fraction of registered properties the administrator verifies.
        purchases_per_investor : tuple[int, int]
            Min and max purchases each investor attempts.
        transfer_rate : float
            Probability an investor transfers part of each holding.
        seed : int | None
            Random seed for reproducibility.
        store : KeyedStore | None
            Backing store (default: in-memory).
        config : LedgerConfig | None
            Ledger behaviour switches.
        sinks : Iterable[Sink]
            Event sinks attached to the ledger.
        events : EventsConfig | None
            Event topic naming.
        """
        self.num_properties = num_properties
        self.num_investors = num_investors
        self.verification_rate = verification_rate
        self.purchases_per_investor = purchases_per_investor
        self.transfer_rate = transfer_rate
        self.seed = seed
        self.rng = random.Random(seed)

        self.clock = ManualClock(start=1_700_000_000)
        self.authorizer = IdentityAuthorizer()
        self.ledger = RealEstateLedger(
            store=store if store is not None else InMemoryKeyedStore(),
            authorizer=self.authorizer,
            clock=self.clock,
            config=config,
            sinks=sinks,
            events=events,
        )

        identities = IdentityGenerator(seed=seed).generate_many(num_investors + 1)
        self.admin = identities[0]
        self.investors = identities[1:]
        self._property_gen = PropertyGenerator(seed=seed)
        self._counts: dict[str, int] = {
            "purchases": 0,
            "transfers": 0,
        }

    def generate(self) -> RealEstateLedger:
        """Run the full scenario and return the populated ledger."""
        logger.info(
            "Generating marketplace: %d properties, %d investors",
            self.num_properties,
            self.num_investors,
        )

        # Every participant in this simulation holds its own keys
        self.authorizer.prove(self.admin, *self.investors)
        self.ledger.initialize(self.admin)

        property_ids = self._register_properties()
        verified = self._verify_properties(property_ids)
        if verified:
            self._run_purchases(verified)
        if len(self.investors) > 1:
            self._run_transfers()

        logger.info("Marketplace scenario complete: %s", self.summary())
        return self.ledger

    def _tick(self) -> None:
        self.clock.advance(self.rng.randint(1, 3600))

    def _register_properties(self) -> list[int]:
        property_ids = []
        for _ in range(self.num_properties):
            self._tick()
            details = self._property_gen.generate()
            property_ids.append(self.ledger.register_property(**asdict(details)))
        return property_ids

    def _verify_properties(self, property_ids: list[int]) -> list[int]:
        count = round(len(property_ids) * self.verification_rate)
        verified = sorted(self.rng.sample(property_ids, count))
        for property_id in verified:
            self._tick()
            self.ledger.verify_property(property_id, caller=self.admin)
        return verified

    def _run_purchases(self, verified: list[int]) -> None:
        low, high = self.purchases_per_investor
        for investor in self.investors:
            for _ in range(self.rng.randint(low, high)):
                property_id = self.rng.choice(verified)
                available = self.ledger.get_available_shares(property_id)
                if available <= 0:
                    continue
                prop = self.ledger.get_property(property_id)
                # Keep single purchases small relative to the listing
                cap = max(prop.total_shares // 10, 1)
                shares = self.rng.randint(1, min(cap, available))
                self._tick()
                self.ledger.purchase_shares(property_id, shares, investor)
                self._counts["purchases"] += 1

    def _run_transfers(self) -> None:
        for investor in self.investors:
            for holding in self.ledger.get_portfolio(investor):
                if holding.shares == 0 or self.rng.random() >= self.transfer_rate:
                    continue
                recipient = self.rng.choice([i for i in self.investors if i != investor])
                shares = self.rng.randint(1, holding.shares)
                self._tick()
                self.ledger.transfer_shares(holding.property_id, investor, recipient, shares)
                self._counts["transfers"] += 1

    def summary(self) -> dict[str, Any]:
        """Return summary counts of the generated history."""
        stats = self.ledger.get_stats()
        return {
            "properties": stats.total_properties,
            "verified_properties": stats.verified_properties,
            "owner_events": stats.owner_events,
            "transactions": stats.transactions,
            "investors": len(self.investors),
            **self._counts,
        }

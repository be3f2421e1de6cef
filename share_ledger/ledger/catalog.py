"""Property registration, verification and lookup."""

import logging

from share_ledger.exceptions import (
    AlreadyVerifiedError,
    NotAuthorizedError,
    PropertyNotFoundError,
)
from share_ledger.ledger.context import LedgerContext, validate_u64_field
from share_ledger.ledger.stats import StatsAggregator
from share_ledger.models import Property, PropertyDetails

logger = logging.getLogger(__name__)


class PropertyCatalog:
    """Stores property records and owns the id counter and verification status."""

    def __init__(self, context: LedgerContext, stats: StatsAggregator) -> None:
        self.context = context
        self.repos = context.repos
        self.stats = stats

    def register(self, details: PropertyDetails) -> Property:
        """Store a new unverified property under the next sequential id."""
        validate_u64_field("total_shares", details.total_shares)
        validate_u64_field("price_per_share", details.price_per_share)
        property_id = self.repos.state.get_counter() + 1

        prop = Property(
            property_id=property_id,
            title=details.title,
            location=details.location,
            description=details.description,
            image_url=details.image_url,
            total_shares=details.total_shares,
            price_per_share=details.price_per_share,
            registered_at=self.context.clock.now(),
            verified=False,
        )

        self.repos.properties.save(prop)
        self.repos.state.set_counter(property_id)
        self.stats.property_registered()
        return prop

    def verify(self, property_id: int, caller: str | None = None) -> Property:
        """Mark a property verified; administrator only, exactly once.

        Parameters
        ----------
        property_id : int
            Property to verify.
        caller : str | None
            Identity the caller claims. When given it must be the
            administrator. The administrator identity must always pass
            the authorizer.
        """
        admin = self.context.require_admin()
        if caller is not None and caller != admin:
            raise NotAuthorizedError(caller)
        self.context.authorizer.require_authorization(admin)

        prop = self.get(property_id)
        if prop.verified:
            raise AlreadyVerifiedError(property_id)

        prop.verified = True
        self.repos.properties.save(prop)
        self.stats.property_verified()
        return prop

    def get(self, property_id: int) -> Property:
        prop = self.repos.properties.get(property_id)
        if prop is None:
            raise PropertyNotFoundError(property_id)
        return prop

    def exists(self, property_id: int) -> bool:
        return self.repos.properties.exists(property_id)

    def count(self) -> int:
        """Highest id assigned so far."""
        return self.repos.state.get_counter()

    def list(self, start_index: int, limit: int) -> list[Property]:
        """Properties with ids in ``[start_index, start_index + limit]``.

        The upper bound is inclusive and clamped to the id counter, so at
        most ``limit + 1`` records come back. Id 0 never exists and is
        skipped. A missing record inside the range is left out.
        """
        counter = self.count()
        end_index = min(start_index + limit, counter)

        properties = []
        for property_id in range(max(start_index, 1), end_index + 1):
            prop = self.repos.properties.get(property_id)
            if prop is None:
                logger.warning("Property %d missing from catalog during listing", property_id)
                continue
            properties.append(prop)
        return properties

"""Property models for fractional ownership."""

from dataclasses import dataclass

from share_ledger.models.enums import PropertyStatus


@dataclass
class PropertyDetails:
    """Descriptive fields supplied when a property is registered."""

    title: str
    location: str
    description: str
    total_shares: int
    price_per_share: int  # Smallest currency unit per share
    image_url: str = ""


@dataclass
class Property:
    """Registered real-world asset divisible into shares.

    ``property_id`` is assigned sequentially from 1 and never reused.
    ``verified`` moves from False to True exactly once.
    """

    property_id: int
    title: str
    location: str
    description: str
    image_url: str
    total_shares: int
    price_per_share: int
    registered_at: int  # Ledger clock seconds
    verified: bool = False

    @property
    def status(self) -> PropertyStatus:
        return PropertyStatus.VERIFIED if self.verified else PropertyStatus.REGISTERED

    @property
    def valuation(self) -> int:
        """Total value of all shares at the registered price."""
        return self.total_shares * self.price_per_share

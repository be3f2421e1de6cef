"""Generate sample property listings."""

from share_ledger.generators.base import BaseGenerator
from share_ledger.models import PropertyDetails

PROPERTY_KINDS = [
    "Apartment",
    "Townhouse",
    "Loft",
    "Villa",
    "Office Suite",
    "Retail Unit",
    "Warehouse",
]

# Share counts a listing is divided into
SHARE_STRUCTURES = [100, 250, 500, 1000, 5000, 10000]


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property details ready for registration."""

    def generate(self) -> PropertyDetails:
        """Generate one property listing.

        Returns
        -------
        PropertyDetails
            Title, location, description, image and share structure.
        """
        kind = self.rng.choice(PROPERTY_KINDS)
        street = self.fake.street_name()
        city = self.fake.city()

        # Valuation in whole currency units, split across the share count
        valuation = self.rng.randint(80, 3000) * 1000
        total_shares = self.rng.choice(SHARE_STRUCTURES)
        price_per_share = max(valuation // total_shares, 1)

        return PropertyDetails(
            title=f"{kind} on {street}",
            location=f"{self.fake.building_number()} {street}, {city}, {self.fake.state_abbr()}",
            description=self.fake.paragraph(nb_sentences=3),
            total_shares=total_shares,
            price_per_share=price_per_share,
            image_url=f"https://images.example.com/properties/{self.fake.uuid4()}.jpg",
        )

"""Tests for sample data generators."""

from share_ledger.generators import IdentityGenerator, PropertyGenerator
from share_ledger.generators.identity import BASE32_ALPHABET
from share_ledger.generators.property import PROPERTY_KINDS, SHARE_STRUCTURES
from share_ledger.models import PropertyDetails


class TestPropertyGenerator:
    """Tests for PropertyGenerator."""

    def test_generate_returns_details(self, seed: int) -> None:
        details = PropertyGenerator(seed=seed).generate()

        assert isinstance(details, PropertyDetails)
        assert details.title.split(" on ")[0] in PROPERTY_KINDS
        assert details.total_shares in SHARE_STRUCTURES
        assert details.price_per_share >= 1
        assert details.image_url.startswith("https://images.example.com/properties/")
        assert details.description

    def test_reproducible_with_seed(self, seed: int) -> None:
        gen_a = PropertyGenerator(seed=seed)
        gen_b = PropertyGenerator(seed=seed)

        assert [gen_a.generate() for _ in range(5)] == [gen_b.generate() for _ in range(5)]

    def test_different_seeds_differ(self) -> None:
        a = [PropertyGenerator(seed=1).generate() for _ in range(3)]
        b = [PropertyGenerator(seed=2).generate() for _ in range(3)]

        assert a != b


class TestIdentityGenerator:
    """Tests for IdentityGenerator."""

    def test_identity_format(self, seed: int) -> None:
        identity = IdentityGenerator(seed=seed).generate()

        assert len(identity) == 56
        assert identity.startswith("G")
        assert set(identity[1:]) <= set(BASE32_ALPHABET)

    def test_generate_many_distinct(self, seed: int) -> None:
        identities = IdentityGenerator(seed=seed).generate_many(50)

        assert len(identities) == 50
        assert len(set(identities)) == 50

    def test_reproducible_with_seed(self, seed: int) -> None:
        assert (
            IdentityGenerator(seed=seed).generate_many(5)
            == IdentityGenerator(seed=seed).generate_many(5)
        )

"""Generate account-style identities."""

from share_ledger.generators.base import BaseGenerator

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"


class IdentityGenerator(BaseGenerator):
    """Generate 56-character public-key style identities starting with ``G``."""

    def generate(self) -> str:
        return "G" + "".join(self.rng.choices(BASE32_ALPHABET, k=55))

    def generate_many(self, count: int) -> list[str]:
        """Generate ``count`` distinct identities."""
        identities: list[str] = []
        seen: set[str] = set()
        while len(identities) < count:
            identity = self.generate()
            if identity not in seen:
                seen.add(identity)
                identities.append(identity)
        return identities

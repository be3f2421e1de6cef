"""Sample data generators."""

from share_ledger.generators.identity import IdentityGenerator
from share_ledger.generators.property import PropertyGenerator

__all__ = ["IdentityGenerator", "PropertyGenerator"]

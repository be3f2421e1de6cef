"""Scenarios for generating realistic ledger histories."""

from share_ledger.scenarios.marketplace import MarketplaceScenario

__all__ = ["MarketplaceScenario"]

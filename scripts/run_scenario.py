#!/usr/bin/env python3
"""Run a marketplace scenario against the ownership ledger.

Registers and verifies sample properties, simulates investor purchases and
transfers, and prints the resulting statistics and largest holders.

Events can be journaled to JSON Lines files, printed to the console or
published to Kafka; ledger state can live in memory or in PostgreSQL.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from share_ledger.config import LedgerConfig, ShareLedgerConfig
from share_ledger.logging import setup_logging
from share_ledger.scenarios import MarketplaceScenario
from share_ledger.sinks import ConsoleSink, JsonFileSink, KafkaSink
from share_ledger.store.keyed import InMemoryKeyedStore, KeyedStore
from share_ledger.store.postgres import PostgresKeyedStore

logger = logging.getLogger(__name__)


def build_sinks(args: argparse.Namespace, config: ShareLedgerConfig) -> list:
    """Create the event sinks selected on the command line."""
    sinks: list = []
    if args.output_dir:
        sinks.append(JsonFileSink(args.output_dir, pretty=config.output.pretty_json))
    if args.console:
        sinks.append(ConsoleSink(pretty=False))
    if args.kafka_bootstrap:
        config.kafka.bootstrap_servers = args.kafka_bootstrap
        sinks.append(KafkaSink(config.kafka))
    return sinks


def build_store(args: argparse.Namespace) -> KeyedStore:
    """Create the backing store selected on the command line."""
    if args.postgres_url:
        store = PostgresKeyedStore.connect(args.postgres_url)
        store.create_tables()
        return store
    return InMemoryKeyedStore()


def print_summary(scenario: MarketplaceScenario, top: int) -> None:
    """Print scenario statistics and the largest holders."""
    ledger = scenario.ledger
    summary = scenario.summary()

    print("\n" + "=" * 60)
    print("Marketplace Summary")
    print("=" * 60)
    for key, value in summary.items():
        print(f"  {key}: {value}")

    holders = sorted(
        ((ledger.get_total_shares_owned(investor), investor) for investor in scenario.investors),
        reverse=True,
    )[:top]

    print(f"\nTop {len(holders)} holders")
    print("-" * 60)
    for total, investor in holders:
        held_in = [h.property_id for h in ledger.get_portfolio(investor) if h.shares > 0]
        print(f"  {investor[:12]}...  {total:>8} shares in properties {held_in}")


def main() -> None:
    """Main entry point."""
    config = ShareLedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Simulate fractional property trading")
    parser.add_argument(
        "--properties",
        type=int,
        default=10,
        help="Number of properties to register (default: 10)",
    )
    parser.add_argument(
        "--investors",
        type=int,
        default=25,
        help="Number of investor identities (default: 25)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--verification-rate",
        type=float,
        default=0.8,
        help="Fraction of properties the administrator verifies (default: 0.8)",
    )
    parser.add_argument(
        "--transfer-rate",
        type=float,
        default=0.3,
        help="Probability an investor transfers part of a holding (default: 0.3)",
    )
    parser.add_argument(
        "--no-supply-cap",
        action="store_true",
        help="Do not cap purchases at a property's total shares",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for JSON Lines event journals",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print every ledger event to stdout",
    )
    parser.add_argument(
        "--kafka-bootstrap",
        type=str,
        default=None,
        help="Kafka bootstrap servers to publish events to",
    )
    parser.add_argument(
        "--postgres-url",
        type=str,
        default=None,
        help="PostgreSQL connection string for ledger state (default: in-memory)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="Number of largest holders to print (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default=config.log_format,
        help="Log format (default: standard)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=config.log_file,
        help="Also append log lines to this file",
    )

    args = parser.parse_args()

    if not 0.0 <= args.verification_rate <= 1.0:
        parser.error("--verification-rate must be between 0 and 1")
    if not 0.0 <= args.transfer_rate <= 1.0:
        parser.error("--transfer-rate must be between 0 and 1")

    setup_logging(args.log_level, args.log_format, args.log_file)

    ledger_config = LedgerConfig(
        lease_window=config.ledger.lease_window,
        enforce_share_supply=not args.no_supply_cap and config.ledger.enforce_share_supply,
        prune_zero_balances=config.ledger.prune_zero_balances,
    )

    store = build_store(args)
    scenario = MarketplaceScenario(
        num_properties=args.properties,
        num_investors=args.investors,
        verification_rate=args.verification_rate,
        transfer_rate=args.transfer_rate,
        seed=args.seed,
        store=store,
        config=ledger_config,
        sinks=build_sinks(args, config),
        events=config.events,
    )

    try:
        scenario.generate()
        print_summary(scenario, args.top)
    finally:
        try:
            scenario.ledger.close()
        finally:
            if isinstance(store, PostgresKeyedStore):
                store.close()


if __name__ == "__main__":
    main()

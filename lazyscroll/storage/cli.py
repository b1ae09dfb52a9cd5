"""CLI for seeding the items table with demo rows."""

from __future__ import annotations

import argparse
import logging
import random
from datetime import datetime, timedelta, timezone

from lazyscroll.config.logging_config import setup_logging
from lazyscroll.config.settings import get_settings
from lazyscroll.storage.item_store import ItemStore
from lazyscroll.storage.models import Item
from lazyscroll.storage.schema import initialize_database

_CATEGORIES = ("books", "garden", "kitchen", "tools", "toys")
_ADJECTIVES = ("Blue", "Compact", "Deluxe", "Folding", "Heavy", "Quiet", "Spare", "Vintage")
_NOUNS = ("Bench", "Kettle", "Lamp", "Notebook", "Rake", "Shelf", "Trowel", "Wrench")


def make_items(count: int, seed: int | None = None) -> list[Item]:
    """Generate ``count`` demo items with distinct, decreasing timestamps."""
    rng = random.Random(seed)
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        Item(
            name=f"{rng.choice(_ADJECTIVES)} {rng.choice(_NOUNS)} #{i + 1}",
            category=rng.choice(_CATEGORIES),
            price_cents=rng.randint(99, 99_99),
            created_at=(start + timedelta(minutes=i)).isoformat(),
        )
        for i in range(count)
    ]


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(description="Seed the items table with demo data.")
    parser.add_argument("--count", type=int, default=200, help="Number of items to insert.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data.")
    return parser


def main() -> int:
    args = build_parser().parse_args()

    settings = get_settings()
    setup_logging(settings.logging, log_dir=settings.logs_dir)
    initialize_database(settings.db_path)

    logger = logging.getLogger(__name__)

    if args.count < 1:
        logger.error("--count must be >= 1")
        return 2

    store = ItemStore(settings.db_path)
    inserted = store.insert_many(make_items(args.count, seed=args.seed))
    logger.info("Seeded %d items (%d total)", inserted, store.count())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

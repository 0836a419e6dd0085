"""
Seed script - populates the local store with the demo marketplace.

Usage:
    python -m scripts.seed            # upsert demo records
    python -m scripts.seed --reset    # wipe the store first

Gives every developer the same sample data: a demo customer, a demo
worker with a profile, five jobs, two offers and one chat.

This script is IDEMPOTENT - running it twice won't create duplicates.
Demo records are replaced by id. With --reset every collection is
dropped before seeding, so accounts and jobs created by hand are gone.
"""
import argparse
import asyncio

from workova.core.database import Database, database
from workova.core.storage import clear_collections
from workova.services.demo_service import DEMO_JOBS, DEMO_OFFERS, DemoService


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Seed the local store with demo data.")
    p.add_argument(
        "--reset",
        action="store_true",
        help="Delete every stored collection before seeding.",
    )
    return p.parse_args()


async def seed(reset: bool = False, store: Database = database):
    print("Seeding store...")
    await store.init()
    print("  Tables created")

    if reset:
        async with store.unit_of_work() as db:
            await clear_collections(db)
        print("  Existing data cleared")

    await DemoService(store).seed()
    print(f"  Upserted {len(DEMO_JOBS)} jobs and {len(DEMO_OFFERS)} offers")

    await store.dispose()
    print()
    print("Seed complete!")
    print("  Customer: demo@workova.app")
    print("  Worker:   worker@workova.app")


if __name__ == "__main__":
    args = parse_args()
    asyncio.run(seed(reset=args.reset))

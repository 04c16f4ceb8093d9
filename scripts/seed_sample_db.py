#!/usr/bin/env python3
"""
Seed the sample agents database for demos or local testing.

Creates the agents and customer tables (if missing) in the database pointed to
by DATABASE_URL / DB_* settings, then inserts the demo rows from
app.core.sample_db. Use --reset to clear existing rows first.

Run from project root:

    python scripts/seed_sample_db.py
    python scripts/seed_sample_db.py --reset
    python scripts/seed_sample_db.py --url sqlite+aiosqlite:///data/sample.db
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Project root on path so "app" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from app.core.config import DATABASE_URL
from app.core.database import AgentStore
from app.core.sample_db import SEED_AGENTS, SEED_CUSTOMERS, clear_all, init_schema, seed


async def _run(url: str, reset: bool) -> None:
    store = AgentStore.from_url(url, pool_size=1)
    try:
        await init_schema(store.engine)
        if reset:
            await clear_all(store.engine)
            print("Cleared existing agents and customers.")
        await seed(store.engine)
    finally:
        await store.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the sample agents DB for demos/tests.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear all existing rows before inserting seed rows.",
    )
    parser.add_argument(
        "--url",
        default=DATABASE_URL,
        help="SQLAlchemy async database URL (defaults to DATABASE_URL / DB_* settings).",
    )
    args = parser.parse_args()

    asyncio.run(_run(args.url, args.reset))
    print(f"Done. Seeded {len(SEED_AGENTS)} agents and {len(SEED_CUSTOMERS)} customers.")


if __name__ == "__main__":
    main()

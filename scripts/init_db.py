#!/usr/bin/env python3
"""
Creates the events, programs and photos tables.
With --seed, also loads the sample events, programs and photos.

    python scripts/init_db.py [--seed]
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.exc import SQLAlchemyError

from kcssc.core import database
from kcssc.services import seed_service


def init_database(seed: bool = False) -> bool:
    print("📦 Initializing database...\n")

    if not database.is_database_enabled():
        print("❌ Database is disabled. Set DB_ENABLED=true and DATABASE_URL (or the DB_* variables).")
        return False

    try:
        database.init_db()
        print(f"✅ Tables ready ({database.engine.dialect.name})\n")

        db = database.SessionLocal()
        try:
            if seed:
                print("🌱 Seeding database with sample data...\n")
                for label, seed_fn in (
                    ("events", seed_service.seed_events),
                    ("programs", seed_service.seed_programs),
                    ("photos", seed_service.seed_photos),
                ):
                    inserted, skipped = seed_fn(db)
                    print(f"   ✅ {label}: {inserted} inserted, {skipped} skipped (already exist)")
                print()
            else:
                print("💡 To seed with sample data, run: python scripts/init_db.py --seed\n")

            print("📈 Record counts:")
            for table, count in seed_service.record_counts(db).items():
                print(f"   {table}: {count} records")
        finally:
            db.close()
    except SQLAlchemyError as e:
        print(f"❌ Error initializing database: {e}")
        return False

    print("\n✅ Database initialization complete!")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the site's tables")
    parser.add_argument("--seed", action="store_true", help="insert the sample events, programs and photos")
    args = parser.parse_args()
    sys.exit(0 if init_database(seed=args.seed) else 1)

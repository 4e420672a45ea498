#!/usr/bin/env python3
"""
Adds the sample gallery photos, skipping the ones already present.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.exc import SQLAlchemyError

from kcssc.core import database
from kcssc.services import seed_service


def seed_photos() -> bool:
    print("📸 Seeding photos database...\n")

    if not database.is_database_enabled():
        print("❌ Database is disabled. Set DB_ENABLED=true and DATABASE_URL (or the DB_* variables).")
        return False

    try:
        database.init_db()
        db = database.SessionLocal()
        try:
            existing = seed_service.record_counts(db)["photos"]
            if existing:
                print(f"ℹ️  Found {existing} existing photos. Adding new ones...\n")

            inserted, skipped = seed_service.seed_photos(db)
            total = seed_service.record_counts(db)["photos"]
        finally:
            db.close()
    except SQLAlchemyError as e:
        print(f"❌ Error seeding photos: {e}")
        return False

    print("✅ Photos seeding complete!")
    print(f"   Inserted: {inserted} photos")
    print(f"   Skipped: {skipped} photos (already exist)")
    print(f"   Total photos in database: {total}\n")
    return True


if __name__ == "__main__":
    sys.exit(0 if seed_photos() else 1)

"""
Initialize database: creates all tables and indexes.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--no-seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect

from fleet_api.config import settings
from fleet_api.database import Store
from fleet_api.errors import StoreError
from fleet_api.services.brand_service import seed_default_brands


def main():
    parser = argparse.ArgumentParser(description="Create the Fleet API tables")
    parser.add_argument("--no-seed", action="store_true", help="leave the brand table empty")
    args = parser.parse_args()

    print("🗄️  Fleet DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    store = Store(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    # Test connection
    try:
        store.query_all("SELECT 1")
        print("✅ Database connection OK")
    except StoreError as e:
        print(f"❌ Cannot connect to database: {e.message}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    store.create_tables()
    print("✅ All tables created")

    if not args.no_seed:
        if seed_default_brands(store):
            print("✅ Default brand catalog seeded")
        else:
            print("ℹ️  Brand table already populated, catalog not seeded")

    tables = sorted(inspect(store.engine).get_table_names())
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    store.close()
    print("\n🎉 Database ready! You can now start the backend:")
    print(f"   uvicorn fleet_api.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT}")


if __name__ == "__main__":
    main()

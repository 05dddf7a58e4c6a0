import argparse

from sqlalchemy import delete

from cashier.core.logging import setup_logging
from cashier.database import Base, SessionLocal, engine, ensure_sqlite_schema
from cashier.models import import_all_models
from cashier.models.message import Message
from cashier.models.product import Product
from cashier.services.seed_service import SeedDataService


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample products and messages.")
    parser.add_argument(
        "--path",
        default=None,
        help="Seed file to load (defaults to SEED_DATA_PATH).",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing products and messages before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    import_all_models()
    Base.metadata.create_all(bind=engine)
    ensure_sqlite_schema()

    if args.reset:
        db = SessionLocal()
        try:
            db.execute(delete(Message))
            db.execute(delete(Product))
            db.commit()
        finally:
            db.close()

    inserted = SeedDataService(seed_path=args.path).seed_database()
    if inserted:
        print(f"Seed data inserted: {inserted} products.")
    else:
        print("Seed skipped: nothing inserted.")


if __name__ == "__main__":
    main()

"""Utility script to load the sample activities into the database."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.seed import seed_activities


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Insert the sample activities when the activity table is empty.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging while seeding.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed the database using the configured ``DATABASE_URL``."""

    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    initialize_database()

    session = SessionLocal()
    try:
        inserted = seed_activities(session)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Error seeding activities: {exc}") from exc
    finally:
        session.close()

    if inserted:
        print(f"Inserted {inserted} sample activities.")
    else:
        print("Activity table already has data; nothing inserted.")


if __name__ == "__main__":
    main()

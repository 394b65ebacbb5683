"""Counter database management CLI.

Creates or drops the order and line item tables for the database named by
DATABASE_URL. Nothing to do for the in-memory provider.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

from counter.settings import Settings


def _init_domain():
    from counter.domain import counter
    from counter.utils.db import configure_database

    settings = Settings.from_env()
    configure_database(counter, settings.database_url)
    counter.init()
    return counter


def setup_database():
    """Create database schema for the counter domain."""
    from counter.utils.db import setup_db

    print("Initializing counter domain...")
    domain = _init_domain()
    print("Creating counter database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop database schema for the counter domain."""
    from counter.utils.db import drop_db

    print("Initializing counter domain...")
    domain = _init_domain()
    print("Dropping counter database schema...")
    drop_db(domain)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Counter database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

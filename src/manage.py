"""StockFlow database management CLI.

Creates and drops the SQL schema of the StockFlow domain. Only relevant when
a SQL provider is configured (e.g. PROTEAN_ENV=production).

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the StockFlow domain."""
    from stockflow.domain import stockflow
    from stockflow.utils.db import setup_db

    print("Initializing stockflow domain...")
    stockflow.init()
    print("Creating stockflow database schema...")
    setup_db(stockflow)
    print("Done.")


def drop_database():
    """Drop the database schema of the StockFlow domain."""
    from stockflow.domain import stockflow
    from stockflow.utils.db import drop_db

    print("Initializing stockflow domain...")
    stockflow.init()
    print("Dropping stockflow database schema...")
    drop_db(stockflow)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="StockFlow database management")
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

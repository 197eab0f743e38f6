"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load the demo data set
"""

import argparse
import sys


def _init_domain():
    import storefront.catalogue  # noqa: F401
    import storefront.identity  # noqa: F401
    import storefront.ordering  # noqa: F401
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    storefront = _init_domain()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    storefront = _init_domain()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("Done.")


def seed_database():
    from storefront.seed import seed_demo_data

    storefront = _init_domain()
    print("Loading demo data...")
    with storefront.domain_context():
        ids = seed_demo_data()
    for kind, entries in ids.items():
        print(f"  {kind}: {len(entries)}")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load demo categories, products, users and orders")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

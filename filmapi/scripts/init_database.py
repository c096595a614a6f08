"""Initialize the Film API database schema.

Creates all tables defined in SQLAlchemy models and optionally loads
the seed catalog.

Usage:
    python -m filmapi.scripts.init_database
    python -m filmapi.scripts.init_database --drop  # Drop and recreate
    python -m filmapi.scripts.init_database --seed  # Include seed data
"""

import argparse
import sys
from collections.abc import Sequence

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from filmapi.database.connection import DatabaseConnection, get_database
from filmapi.database.models import Base
from filmapi.database.seed import seed_catalog
from filmapi.settings import settings


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Initialize Film API database schema",
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Load the seed catalog after creation",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check connection, don't modify schema",
    )
    return parser.parse_args(argv)


def drop_tables(db: DatabaseConnection) -> None:
    """Drop all catalog tables.

    Args:
        db: DatabaseConnection instance.
    """
    print("🗑️  Dropping existing tables...")
    Base.metadata.drop_all(bind=db.engine)
    print("✅ Tables dropped")


def create_tables(db: DatabaseConnection) -> None:
    """Create all tables from SQLAlchemy models.

    Args:
        db: DatabaseConnection instance.
    """
    print("📋 Creating tables...")
    Base.metadata.create_all(bind=db.engine)
    print("✅ Tables created")


def seed(db: DatabaseConnection) -> None:
    """Load the seed catalog in one transaction.

    Args:
        db: DatabaseConnection instance.
    """
    counts = db.run_in_transaction(seed_catalog)
    for table, count in counts.items():
        print(f"   • {table}: {count} rows")
    print("✅ Seed catalog loaded")


def print_table_summary(db: DatabaseConnection) -> None:
    """Print summary of existing tables.

    Args:
        db: DatabaseConnection instance.
    """
    tables = sorted(inspect(db.engine).get_table_names())

    print("\n📊 Database Tables:")
    print("-" * 40)
    for table in tables:
        print(f"   • {table}")
    print("-" * 40)
    print(f"   Total: {len(tables)} tables")


def _print_banner(db: DatabaseConnection) -> None:
    """Print the banner with the target database."""
    print("=" * 50)
    print("🎬 Film API Database Initialization")
    print("=" * 50)
    print(f"   Dialect: {db.engine.dialect.name}")
    if not settings.database.is_sqlite:
        print(f"   Host: {settings.database.host}")
        print(f"   Port: {settings.database.port}")
        print(f"   Database: {settings.database.database}")
    print("=" * 50)


def run(db: DatabaseConnection, args: argparse.Namespace) -> int:
    """Perform the database operations selected by ``args``.

    Args:
        db: DatabaseConnection instance.
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    if not db.check_connection():
        print("❌ Cannot connect to database")
        return 1
    print("✅ Database connection successful")

    if args.check:
        print_table_summary(db)
        return 0

    if args.drop:
        drop_tables(db)

    create_tables(db)

    if args.seed:
        print("\n🌱 Seeding catalog...")
        try:
            seed(db)
        except SQLAlchemyError as e:
            print(f"❌ Seeding failed: {e}")
            return 1

    print_table_summary(db)
    print("\n✅ Database initialization complete!")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = parse_args(argv)
    db = get_database()
    _print_banner(db)
    return run(db, args)


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point. Allows ``python -m filmapi``."""

import argparse
import sys


def run_api() -> None:
    """Start the FastAPI application with uvicorn."""
    import uvicorn

    from filmapi.settings import settings

    print("🌐 Starting Film API...")
    uvicorn.run(
        "filmapi.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


def run_init_db(drop: bool, seed: bool) -> int:
    """Create the schema, optionally dropping it first and seeding it."""
    from filmapi.scripts.init_database import main as init_database

    argv = []
    if drop:
        argv.append("--drop")
    if seed:
        argv.append("--seed")
    return init_database(argv)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Film API - characters, movies and franchises catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m filmapi init-db --seed     # Create tables and load seed data
  python -m filmapi init-db --drop     # Recreate tables
  python -m filmapi api                # Start the REST API
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    subparsers.add_parser("api", help="Start the REST API")

    init_parser = subparsers.add_parser("init-db", help="Create database schema")
    init_parser.add_argument("--drop", action="store_true", help="Drop tables first")
    init_parser.add_argument("--seed", action="store_true", help="Load seed catalog")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "api":
            run_api()
            return 0
        return run_init_db(args.drop, args.seed)
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())

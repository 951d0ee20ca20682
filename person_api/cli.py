"""
CLI entry point for the person registry.

Usage:
    # Serve the API
    python -m person_api.cli serve --port 8080

    # Create the database schema and exit
    python -m person_api.cli init-db
"""

import argparse
import logging

from person_api.core.config import settings
from person_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP API under uvicorn."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run(
        "person_api.main:app",
        host=args.host,
        port=args.port,
        workers=args.workers,
        reload=False,
    )


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the persons table, search function and indexes."""
    from person_api.infrastructure.database import build_engine, check_connection
    from person_api.infrastructure.schema import ensure_schema

    engine = build_engine(settings)
    try:
        check_connection(engine)
        ensure_schema(engine)
    finally:
        engine.dispose()


def main() -> None:
    configure_logging(level=settings.log_level, log_sql=settings.log_sql)

    parser = argparse.ArgumentParser(description="Person Registry CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8080)
    serve_parser.add_argument(
        "--workers", type=int, default=1,
        help="Number of uvicorn worker processes",
    )
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser(
        "init-db", help="Create the database schema and exit"
    )
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()

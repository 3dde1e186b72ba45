"""CLI commands for Daily Diet."""

import argparse
import logging
import sys
from typing import Optional

from app.config import settings
from app.database import engine
from app.main import configure_logging, create_app, serve
from app.models import Base

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all tables on the configured database."""
    Base.metadata.create_all(engine)
    print(f"Database initialized: {engine.url.render_as_string(hide_password=True)}")


def run_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Start the HTTP server, overriding host/port from settings if given."""
    overrides = {}
    if host:
        overrides["host"] = host
    if port:
        overrides["port"] = port
    server_settings = settings.model_copy(update=overrides)

    configure_logging(server_settings.log_level)
    serve(create_app(server_settings), server_settings)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Daily Diet CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init-db command
    subparsers.add_parser("init-db", help="Create database tables")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", help="Bind address (default from settings)")
    serve_parser.add_argument(
        "--port", type=int, help="Port to listen on (default from settings)"
    )

    args = parser.parse_args(argv)

    if args.command == "init-db":
        init_db()
    elif args.command == "serve":
        run_server(args.host, args.port)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

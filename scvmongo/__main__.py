"""scvmongo CLI entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv(Path.cwd() / ".env")

from scvmongo import __version__
from scvmongo.config import get_settings
from scvmongo.mongo import (
    MongoConnectionError,
    close_mongodb,
    connect_mongodb,
    sanitize_mongodb_url,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print("\nConfiguration Error:\n")
        for error in e.errors():
            print(f"  - {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1

    print("\n=== scvmongo Configuration ===\n")
    print(f"Environment: {settings.environment}")
    print(f"Log Level: {settings.log_level}\n")

    print("MongoDB:")
    print(f"  URL: {sanitize_mongodb_url(settings.mongo.url)}")
    print(f"  Database: {settings.mongo.database}")
    print(f"  Ping Timeout: {settings.mongo.ping_timeout_seconds}s\n")

    print("Server:")
    print(f"  Bind: {settings.server.host}:{settings.server.port}\n")

    print("Secrets:")
    print(f"  JWT Secret: {'set' if settings.auth.jwt_secret else 'not set'}")
    print(f"  Logfire: {'set' if settings.logfire_token else 'not set'}\n")
    return 0


def cmd_ping(args: argparse.Namespace) -> int:
    """Connect to MongoDB and run the startup health check."""
    settings = get_settings()

    async def run() -> None:
        database = await connect_mongodb(
            settings.mongo.database,
            settings.mongo.url,
            settings.mongo,
        )
        close_mongodb(database)

    try:
        asyncio.run(run())
    except MongoConnectionError as e:
        logger.error(str(e))
        print(f"\nMongoDB unreachable: {e}\n")
        return 1

    print(f"\nMongoDB OK: {sanitize_mongodb_url(settings.mongo.url)}\n")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API server with uvicorn."""
    import uvicorn

    from scvmongo.api.server import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=args.host or settings.server.host,
        port=args.port or settings.server.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="scvmongo: generic MongoDB repository and bearer-token API guard",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"scvmongo {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_ping = subparsers.add_parser(
        "ping",
        help="Check the MongoDB connection",
    )
    parser_ping.set_defaults(func=cmd_ping)

    parser_serve = subparsers.add_parser(
        "serve",
        help="Start the API server",
    )
    parser_serve.add_argument("--host", help="Override server host")
    parser_serve.add_argument("--port", type=int, help="Override server port")
    parser_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

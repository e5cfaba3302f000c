"""Command line entry point for serving the todo API."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from coverme.logging_utils import configure_logging
from coverme.settings import get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="coverme", description="Serve the todo API.")
    parser.add_argument("--host", default=settings.host, help="interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="port to listen on (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level, help="log level (default: %(default)s)")
    return parser


def log_startup(host: str, port: int) -> None:
    """Log a single startup line for process managers."""
    settings = get_settings()
    if settings.workers > 1:
        logger.warning(
            "WEB_CONCURRENCY=%s ignored; todos are stored in process memory, using 1 worker",
            settings.workers,
        )
    logger.info("Starting on %s:%s", host, port)


def main(argv: Optional[Sequence[str]] = None) -> None:
    import uvicorn

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    log_startup(args.host, args.port)
    try:
        uvicorn.run(
            "coverme.main:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            log_level=args.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)


if __name__ == "__main__":
    main()

"""
CLI for running the Repository Tracker API server.

Options default to the values from settings (APP_* env vars / .env).
"""

import argparse
import logging

import uvicorn

from repo_tracker.settings import get_settings
from repo_tracker.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    cfg = get_settings()

    parser = argparse.ArgumentParser(
        description="Serve the in-memory repository tracker over HTTP"
    )

    parser.add_argument(
        "--host",
        default=cfg.api_host,
        help=f"Interface to bind (default: {cfg.api_host})"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=cfg.api_port,
        help=f"Port to listen on (default: {cfg.api_port})"
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        default=cfg.api_reload,
        help="Auto-reload on code changes (dev only)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=cfg.log_level,
        help=f"Log level (default: {cfg.log_level})"
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    logger.info(f"Starting API server on {args.host}:{args.port}")
    logger.info(f"Reload: {args.reload}")

    try:
        uvicorn.run(
            "api.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level.lower()
        )
        return 0

    except Exception as e:
        logger.error(f"Server failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    exit(main())

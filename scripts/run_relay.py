"""Run the email relay that forwards browser-originated emails to SendGrid."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from releasetrack.config import get_settings


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the relay process."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Start the ReleaseTrack Pro email relay.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Interface to bind (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.relay_port,
        help=f"Port to listen on (default: RELAY_PORT or {settings.relay_port})",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level for the relay and uvicorn (default: info)",
    )
    return parser.parse_args()


def main() -> None:
    """Start the relay application with uvicorn."""

    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from main import create_relay_app

    uvicorn.run(create_relay_app(), host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()

"""Send a test email through the configured delivery backend."""

from __future__ import annotations

import argparse
import logging

from releasetrack.config import get_settings
from releasetrack.infrastructure.email import EmailMessage, build_delivery_client
from releasetrack.utils import format_timestamp


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check that ReleaseTrack Pro can deliver email.",
    )
    parser.add_argument("to", nargs="+", help="Recipient address(es)")
    parser.add_argument(
        "--mode",
        choices=["direct", "relay"],
        default=None,
        help="Override EMAIL_DELIVERY_MODE for this run",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = get_settings()
    if args.mode:
        settings = settings.model_copy(update={"email_delivery_mode": args.mode})

    client = build_delivery_client(settings)
    message = EmailMessage(
        sender=settings.sendgrid_sender,
        to=args.to,
        subject="Test Email from ReleaseTrack Pro",
        html=(
            "<h1>This is a test email</h1>"
            "<p>If you're seeing this, the email notification system in ReleaseTrack Pro "
            "is working correctly.</p>"
            f"<p>Time sent: {format_timestamp()}</p>"
        ),
        text=(
            "This is a test email from ReleaseTrack Pro. If you're seeing this, "
            "the email notification system is working correctly."
        ),
    )
    result = client.send(message)
    if not result.success:
        raise SystemExit(f"Email was not sent via {client.name}: {result.error}")
    print(f"Email sent via {client.name}: {result.data}")


if __name__ == "__main__":
    main()

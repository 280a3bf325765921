"""Utility script to register a user in the database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from releasetrack.application.use_cases.users.create_user import create_user
from releasetrack.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Register a ReleaseTrack Pro user that tickets can reference.",
    )
    parser.add_argument("--first-name", required=True, help="User's first name")
    parser.add_argument("--last-name", default="", help="User's last name (optional)")
    parser.add_argument("--email", required=True, help="Address notifications are sent to")
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            first_name=args.first_name,
            last_name=args.last_name,
            email=args.email,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the user to the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.display_name}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()

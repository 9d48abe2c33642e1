"""Utility script to create a user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import create_user
from app.domain.entities import ROLE_ADMIN, ROLE_USER
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.realtime import ChangeEventBroadcaster, ChangeEventPublisher


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a user for the warehouse inventory service.",
    )
    parser.add_argument("--name", default="Admin", help="User name used to log in (default: Admin)")
    parser.add_argument(
        "--role",
        choices=(ROLE_USER, ROLE_ADMIN),
        default=ROLE_ADMIN,
        help=f"Role of the user (default: {ROLE_ADMIN})",
    )
    parser.add_argument("--email", default=None, help="Email address (optional)")
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the user. Prompted for interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password given.")

    initialize_database()

    # No server is running here, so nobody is listening for the event.
    publisher = ChangeEventPublisher(ChangeEventBroadcaster())
    session = SessionLocal()
    try:
        user = create_user(
            session,
            publisher,
            name=args.name,
            role=args.role,
            email=args.email,
            password=password,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Role: {user.role}\n"
            f"  Email: {user.email or '-'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()

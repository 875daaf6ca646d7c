"""Command-line helpers for operating the MIS backend."""

from __future__ import annotations

import argparse
import getpass
import logging
from collections.abc import Sequence

from mis_backend.api.services import SessionService
from mis_backend.database import DatabaseService, UserRepository
from mis_backend.observability import setup_logging
from mis_backend.settings import get_settings
from mis_backend.shared import UserRole

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mis-create-admin",
        description="Create or update a dashboard user with a password.",
    )
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--organization", default=None)
    parser.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.ADMINISTRATOR.value,
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Prompted for when omitted.",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Defaults to the configured DATABASE_URL.",
    )
    return parser


def create_admin(argv: Sequence[str] | None = None) -> int:
    """Entry point of ``mis-create-admin``."""

    args = _build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")

    password = args.password or getpass.getpass("Password: ")
    if not password:
        logger.error("A password is required")
        return 1

    session_service = SessionService(settings=settings)
    database = DatabaseService(args.database_url, settings=settings)
    try:
        with database.session() as session:
            user = UserRepository(session).upsert(
                name=args.name.strip(),
                email=args.email,
                role=UserRole(args.role),
                organization=args.organization,
                password_hash=session_service.hash_password(password),
            )
            logger.info("Saved user %s (%s)", user.email, user.role.value)
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(create_admin())

"""
Create an account (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password admin

With no arguments, creates the admin from ADMIN_EMAIL / ADMIN_PASSWORD if that
account does not exist yet (safe to run on every deploy).
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.credentials import CredentialGuard
from app.services.errors import ConflictError, ValidationError

logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def bootstrap_admin(guard: CredentialGuard) -> int:
    settings = guard.settings
    if not settings.ADMIN_EMAIL or settings.ADMIN_PASSWORD is None:
        print(
            "Pass EMAIL PASSWORD, or set ADMIN_EMAIL and ADMIN_PASSWORD.",
            file=sys.stderr,
        )
        return 1
    try:
        user = guard.register(
            settings.ADMIN_EMAIL,
            settings.ADMIN_PASSWORD.get_secret_value(),
            first_name=settings.ADMIN_FIRST_NAME,
            last_name=settings.ADMIN_LAST_NAME,
            role="admin",
        )
    except ConflictError:
        print(f"Admin '{settings.ADMIN_EMAIL}' already exists; nothing to do.")
        return 0
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        return 1
    print(f"Created admin '{user.email}'.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a portfolio account (no public registration).")
    parser.add_argument("email", nargs="?", help="Account email")
    parser.add_argument("password", nargs="?", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    parser.add_argument("--first-name", default=None)
    parser.add_argument("--last-name", default=None)
    args = parser.parse_args(argv)

    if (args.email is None) != (args.password is None):
        parser.error("EMAIL and PASSWORD must be given together")

    db = SessionLocal()
    try:
        guard = CredentialGuard(db, get_settings())
        if args.email is None:
            return bootstrap_admin(guard)
        try:
            user = guard.register(
                args.email,
                args.password,
                first_name=args.first_name,
                last_name=args.last_name,
                role=args.role,
            )
        except (ConflictError, ValidationError) as e:
            print(e.message, file=sys.stderr)
            return 1
        print(f"Created user '{user.email}' with role '{user.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import getpass
import logging
from collections.abc import Sequence

from house_major.data.db import init_db
from house_major.data.seed import seed_database
from house_major.services import create_user
from house_major.services.errors import DuplicateEmailError


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "house_major.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def _seed(args: argparse.Namespace) -> int:
    init_db()
    inserted = seed_database()
    print(f"✅ Seeded {inserted['services']} service(s) and {inserted['projects']} project(s).")
    return 0


def _create_admin(args: argparse.Namespace) -> int:
    password = args.password or getpass.getpass("Password: ")
    if len(password) < 6:
        print("❌ Password must be at least 6 characters.")
        return 1

    init_db()
    try:
        user = create_user(args.username or "", args.email, password)
    except DuplicateEmailError as exc:
        print(f"❌ Error: {exc}")
        return 1
    print(f"✅ Created admin {user['username']} <{user['email']}>")
    return 0


def _admin(args: argparse.Namespace) -> int:
    from house_major.tui import run_tui

    run_tui()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="house-major",
        description="House Major site backend and admin tools.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on source changes.")
    serve.set_defaults(handler=_serve)

    seed = commands.add_parser("seed", help="Insert the default services and portfolio projects.")
    seed.set_defaults(handler=_seed)

    create_admin = commands.add_parser("create-admin", help="Create an admin account.")
    create_admin.add_argument("email")
    create_admin.add_argument("--username", default=None)
    create_admin.add_argument("--password", default=None, help="Prompted for when omitted.")
    create_admin.set_defaults(handler=_create_admin)

    admin = commands.add_parser("admin", help="Open the terminal admin dashboard.")
    admin.set_defaults(handler=_admin)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)

"""Command-line utility for resolving guest names and managing their records."""

from __future__ import annotations

import argparse
import json
import sys

from fastapi import HTTPException

from app.deps import get_all_display_names, get_app_state, get_redis_key_for_display_name
from app.services.auth_service import lookup_name
from app.services.user_service import find_user_by_full_name, set_password, set_user
from core.search.name_search import search_display_name


def _print(payload) -> None:
    print(json.dumps(payload, indent=2))


def cmd_search(args: argparse.Namespace) -> None:
    """Print the raw ranked matcher output for a typed name."""
    _print({"query": args.name, "matches": search_display_name(args.name, get_all_display_names())})


def cmd_lookup(args: argparse.Namespace) -> None:
    """Resolve a name the way the sign-in page does."""
    try:
        _print(lookup_name(args.name).model_dump())
    except HTTPException as exc:
        _print({"error": exc.detail})
        sys.exit(1)


def cmd_set_user(args: argparse.Namespace) -> None:
    user = set_user(args.name)
    if user is None:
        _print({"error": "SET_USER_FAILED"})
        sys.exit(1)
    _print(user.model_dump())


def cmd_get_user(args: argparse.Namespace) -> None:
    user = find_user_by_full_name(args.name)
    _print(user.model_dump() if user else {"error": "USER_NOT_FOUND"})


def cmd_set_password(args: argparse.Namespace) -> None:
    """Store the password for a display name listed in config/users.yaml."""
    redis_key = get_redis_key_for_display_name(args.display_name)
    if not redis_key:
        _print({"error": "INVALID_USER_CONFIGURATION"})
        sys.exit(1)
    _print({"display_name": args.display_name, "stored": set_password(redis_key, args.password)})


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="wed")
    sub = parser.add_subparsers(dest="command")

    search_p = sub.add_parser("search")
    search_p.add_argument("name")
    search_p.set_defaults(func=cmd_search)

    lookup_p = sub.add_parser("lookup")
    lookup_p.add_argument("name")
    lookup_p.set_defaults(func=cmd_lookup)

    set_user_p = sub.add_parser("set-user")
    set_user_p.add_argument("name")
    set_user_p.set_defaults(func=cmd_set_user)

    get_user_p = sub.add_parser("get-user")
    get_user_p.add_argument("name")
    get_user_p.set_defaults(func=cmd_get_user)

    password_p = sub.add_parser("set-password")
    password_p.add_argument("display_name")
    password_p.add_argument("password")
    password_p.set_defaults(func=cmd_set_password)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point invoked via `python -m cli.wed_cli ...`."""
    get_app_state()  # ensure initialization
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()

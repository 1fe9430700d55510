"""Entry point for ``python -m miro``.

Usage:
    python -m miro board get <board-id>
    python -m miro board create "Sprint planning" --description "Q3"
    python -m miro me

The access token is read from ``MIRO_ACCESS_TOKEN`` (or ``.env``).
"""

from __future__ import annotations

import argparse
import logging

import httpx

from miro.client import MiroClient
from miro.config import settings
from miro.exceptions import MiroError
from miro.logging_config import setup_logging
from miro.schemas import CreateBoardRequest

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="miro", description="Miro REST API client")
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    board = commands.add_parser("board", help="Board operations")
    actions = board.add_subparsers(dest="action", required=True)
    get = actions.add_parser("get", help="Print the name of a board")
    get.add_argument("board_id")
    create = actions.add_parser("create", help="Create a board and print its id")
    create.add_argument("name")
    create.add_argument("--description", default=None)

    commands.add_parser("me", help="Print the name of the token's user")
    return parser


def _run(client: MiroClient, args: argparse.Namespace) -> str:
    if args.command == "me":
        return client.users.get_current_user().name
    if args.action == "get":
        return client.boards.get(args.board_id).name
    board = client.boards.create(
        CreateBoardRequest(name=args.name, description=args.description)
    )
    return board.id


def main(
    argv: list[str] | None = None,
    *,
    _transport: httpx.BaseTransport | None = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, settings.log_format)

    if not settings.access_token:
        parser.error("MIRO_ACCESS_TOKEN is not set")

    with MiroClient(
        settings.access_token,
        base_url=settings.base_url,
        api_version=settings.api_version,
        user_agent=settings.user_agent,
        timeout=settings.timeout,
        _transport=_transport,
    ) as client:
        try:
            print(_run(client, args))
        except (MiroError, httpx.HTTPError) as exc:
            logger.error("%s", exc)
            return 1

    logger.debug(
        "Rate limit after call: %d/%d remaining",
        client.rate_limit.remaining, client.rate_limit.limit,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

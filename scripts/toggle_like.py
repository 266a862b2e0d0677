#!/usr/bin/env python3
"""Toggle a like against a running API through the optimistic coordinator.

Mints a local token, so the API must share this environment's
AUTH__JWT_SECRET.

Usage:
    python scripts/toggle_like.py <post-id>
    python scripts/toggle_like.py <comment-id> --comment --user-id <uuid>
"""

import argparse
import asyncio
import sys
from uuid import UUID, uuid4

from campus.adapter.toggle import create_http_coordinator
from campus.config import Settings
from campus.domain.model import Applied, Failed, Rejected
from campus.domain.value import UserId
from campus.util.jwt import create_token
from campus.util.logging import get_logger, setup_logging
from campus.util.observability import configure_logfire

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Toggle a like on a post or comment.")
    parser.add_argument("target_id", type=UUID, help="Post or comment ID")
    parser.add_argument(
        "--comment", action="store_true", help="Target is a comment, not a post"
    )
    parser.add_argument(
        "--user-id", type=UUID, default=None, help="Acting user (random if omitted)"
    )
    parser.add_argument("--handle", default="cli", help="Handle to put in the token")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    user_id = UserId(args.user_id or uuid4())
    token = create_token(str(user_id), args.handle, settings.auth)
    path = "/comments/{key}/like" if args.comment else "/posts/{key}/like"

    coordinator = create_http_coordinator(
        settings, path_template=path, auth_token=token, actor=user_id
    )
    outcome = await coordinator.toggle(args.target_id)

    if isinstance(outcome, Applied):
        print(f"{'liked' if outcome.active else 'unliked'} (count={outcome.count})")
        return 0
    if isinstance(outcome, Rejected):
        print(f"rejected: {outcome.reason.value}")
        return 1
    if isinstance(outcome, Failed):
        logger.error(f"Toggle failed: {outcome.error}")
        print(f"failed: {outcome.error}")
    return 1


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    return asyncio.run(run(parse_args(argv), settings))


if __name__ == "__main__":
    sys.exit(main())

"""
Issue Leaderboard CLI.

Ranks the open issues of a GitHub repository by thumbs-up reactions.
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv

from leaderboard.cli.formatters import format_output
from leaderboard.config import get_settings
from leaderboard.constants import DEFAULT_OWNER, DEFAULT_REPO, REACTION_LABELS
from leaderboard.exceptions import ConfigurationError
from leaderboard.logging import configure_logging, get_logger
from leaderboard.services import build_leaderboard

logger = get_logger("cli")


def _positive(convert):
    """argparse type that only accepts values above zero."""

    def parse(value: str):
        try:
            number = convert(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
        if not number > 0:
            raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
        return number

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issue-leaderboard",
        description="Rank a repository's open issues by thumbs-up reactions",
    )
    parser.add_argument("owner", nargs="?", default=DEFAULT_OWNER, help="Repository owner")
    parser.add_argument("repo", nargs="?", default=DEFAULT_REPO, help="Repository name")
    parser.add_argument(
        "--reaction",
        action="append",
        choices=REACTION_LABELS,
        dest="reactions",
        help="Reaction to count (repeatable, default +1)",
    )
    parser.add_argument("--top", type=int, help="Show top N issues")
    parser.add_argument(
        "--format", choices=["text", "json", "csv", "markdown"], default="text"
    )
    parser.add_argument("--output", "-o", help="Output file")
    parser.add_argument(
        "--concurrency", type=_positive(int), help="Maximum concurrent reaction requests"
    )
    parser.add_argument("--timeout", type=_positive(float), help="Per-request timeout in seconds")
    parser.add_argument(
        "--unique-actors", action="store_true", help="Count each user once per issue"
    )
    parser.add_argument("--log-level", help="Log level (default from LOG_LEVEL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show issue titles")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with CLI interface."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    overrides = {}
    if args.concurrency is not None:
        overrides["max_concurrency"] = args.concurrency
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        result = asyncio.run(
            build_leaderboard(
                settings,
                args.owner,
                args.repo,
                labels=args.reactions,
                limit=args.top,
                unique_actors=args.unique_actors,
            )
        )
    except ConfigurationError as e:
        logger.error("configuration_invalid", errors=e.errors)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output = format_output(result, args.format, verbose=args.verbose)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Wrote {len(result.entries)} entries to {args.output}")
    else:
        print(output, end="")


if __name__ == "__main__":
    main()

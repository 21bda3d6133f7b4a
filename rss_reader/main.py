"""Command-line entry point for RSS Reader."""

import argparse
import sys
from datetime import UTC, datetime
from typing import TextIO

from . import __version__
from .config import Config, ReaderConfig
from .errors import FeedReaderError
from .logging_config import create_execution_logger, setup_structured_logging
from .present import present
from .rss import FeedFetcher, FeedParser
from .source import resolve_url


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rss-reader",
        description="Fetch an RSS feed and print a summary of its items.",
    )
    parser.add_argument(
        "url", nargs="?", help="feed URL (prompted for when omitted)"
    )
    parser.add_argument(
        "--strict-exit",
        action="store_true",
        default=None,
        help="exit with a non-zero status when the feed cannot be read",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="logging level for diagnostics written to stderr",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def run(
    url: str | None,
    stdin: TextIO,
    stdout: TextIO,
    config: ReaderConfig,
    fetcher: FeedFetcher | None = None,
    parser: FeedParser | None = None,
) -> int:
    """
    Run the resolve, fetch, parse and present stages in order.

    Args:
        url: URL given on the command line, or None to prompt for one
        stdin: Stream the URL prompt reads from
        stdout: Stream for the prompt, the summary and error messages
        config: Reader settings
        fetcher: Fetcher to use (a default one is built when omitted)
        parser: Parser to use (a default one is built when omitted)

    Returns:
        Process exit status
    """
    execution_id = f"run_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
    main_logger = create_execution_logger("main", execution_id)
    main_logger.log_execution_start()

    fetcher = fetcher or FeedFetcher(timeout=config.timeout, execution_id=execution_id)
    parser = parser or FeedParser(execution_id=execution_id)

    try:
        feed_url = resolve_url(url, stdin, stdout, execution_id=execution_id)
        data = fetcher.fetch(feed_url)
        channel = parser.parse(data)
    except FeedReaderError as e:
        print(e, file=stdout)
        main_logger.log_execution_end(
            success=False, error=str(e), error_type=type(e).__name__
        )
        return e.exit_code if config.strict_exit else 0

    present(channel, stdout)
    main_logger.log_execution_end(success=True, items_count=len(channel.items))
    return 0


def main(argv: list[str] | None = None) -> int:
    # Only the first positional is the feed URL; anything after it is ignored
    args, _extra = build_arg_parser().parse_known_args(argv)

    try:
        config = Config().get_reader_config(
            log_level=args.log_level, strict_exit=args.strict_exit
        )
        setup_structured_logging(config.log_level)
    except ValueError as e:
        print(f"rss-reader: {e}", file=sys.stderr)
        return 2

    return run(args.url, sys.stdin, sys.stdout, config)


if __name__ == "__main__":
    sys.exit(main())

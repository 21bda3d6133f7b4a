"""Feed URL resolution for RSS Reader."""

from typing import TextIO

from .errors import InputError
from .logging_config import create_execution_logger

PROMPT = "Enter URL of RSS Feed: "


def resolve_url(
    url: str | None,
    stdin: TextIO,
    stdout: TextIO,
    execution_id: str | None = None,
) -> str:
    """Return the feed URL from the command line or an interactive prompt.

    A URL given on the command line is used verbatim and stdin is left alone.
    Otherwise the prompt is written to ``stdout`` and one line is read from
    ``stdin``; its trailing newline and, if present, a trailing carriage return are
    removed. Empty input is returned as an empty string.

    Raises:
        InputError: If reading from ``stdin`` fails
    """
    logger = create_execution_logger("source", execution_id)

    if url is not None:
        logger.debug("Using feed URL from arguments", feed_url=url)
        return url

    stdout.write(PROMPT)
    stdout.flush()

    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read feed URL: {e}", error=str(e))
        raise InputError(f"Failed to read feed URL: {e}", cause=e) from e

    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]

    logger.debug("Using feed URL from input", feed_url=line)
    return line

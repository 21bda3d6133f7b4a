"""Error types for RSS Reader.

Each stage of the pipeline raises one of these; the pipeline reports the
message once and maps the error to its ``exit_code`` when strict exit codes
are enabled.
"""


class FeedReaderError(Exception):
    """Base class for all pipeline failures."""

    exit_code = 1

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class InputError(FeedReaderError):
    """The feed URL could not be read from interactive input."""

    exit_code = 2


class FetchError(FeedReaderError):
    """The feed could not be downloaded."""

    exit_code = 3


class TransportError(FetchError):
    """DNS, connection, TLS or I/O failure while talking to the server."""


class StatusError(FetchError):
    """The server answered with a status other than 200 OK."""

    exit_code = 4

    def __init__(self, status_code: int):
        super().__init__(f"Status error: {status_code}")
        self.status_code = status_code


class ParseError(FeedReaderError):
    """The response body is not well-formed XML."""

    exit_code = 5

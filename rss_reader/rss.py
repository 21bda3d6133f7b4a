"""RSS feed fetching and parsing for RSS Reader."""

import xml.etree.ElementTree as ET

import requests

from .errors import ParseError, StatusError, TransportError
from .logging_config import create_execution_logger
from .models import Channel, Item

# <item> child tag -> Item field
ITEM_FIELDS = {
    "title": "title",
    "guid": "link",
    "description": "description",
    "pubDate": "date",
}


class FeedFetcher:
    """Downloads raw feed documents over HTTP."""

    def __init__(
        self,
        timeout: float | None = None,
        session: requests.Session | None = None,
        execution_id: str | None = None,
    ):
        """Initialize FeedFetcher.

        Args:
            timeout: HTTP request timeout in seconds, None for no timeout
            session: Session to issue requests through
            execution_id: Execution ID for logging context
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = create_execution_logger("fetcher", execution_id)

    def fetch(self, url: str) -> bytes:
        """Download a feed and return its body.

        Args:
            url: Feed URL, used as given

        Returns:
            The full response body

        Raises:
            TransportError: If the request or the body read fails
            StatusError: If the server answers with anything but 200 OK
        """
        self.logger.info("Downloading feed content", feed_url=url)

        try:
            with self.session.get(url, timeout=self.timeout, stream=True) as response:
                if response.status_code != requests.codes.ok:
                    self.logger.error(
                        f"Unexpected status for {url}: {response.status_code}",
                        feed_url=url,
                        status_code=response.status_code,
                    )
                    raise StatusError(response.status_code)

                data = response.content
        except requests.RequestException as e:
            self.logger.error(
                f"Failed to download feed {url}: {e}", feed_url=url, error=str(e)
            )
            raise TransportError(str(e), cause=e) from e

        self.logger.info(
            "Feed downloaded successfully",
            feed_url=url,
            status_code=requests.codes.ok,
            content_length=len(data),
        )
        return data


class FeedParser:
    """Decodes RSS documents into Channel objects."""

    def __init__(self, execution_id: str | None = None):
        self.logger = create_execution_logger("parser", execution_id)

    def parse(self, data: bytes) -> Channel:
        """Parse an RSS document.

        The document root may have any name; its ``channel`` child supplies the
        channel title and the items. Elements outside ``ITEM_FIELDS`` are
        ignored and missing ones decode to empty strings.

        Args:
            data: Raw XML document

        Returns:
            The decoded channel

        Raises:
            ParseError: If the document is not well-formed XML
        """
        try:
            root = ET.fromstring(data)
        except (ET.ParseError, ValueError) as e:
            # ValueError: declared multi-byte encodings expat cannot decode
            self.logger.error(f"Failed to parse feed: {e}", error=str(e))
            raise ParseError(str(e), cause=e) from e

        channels = [child for child in root if local_name(child.tag) == "channel"]
        if not channels:
            self.logger.warning("Document has no channel element")
            return Channel()

        # Repeated channels merge: the last title wins, items accumulate
        title = ""
        items = []
        for channel_elem in channels:
            for child in channel_elem:
                name = local_name(child.tag)
                if name == "title":
                    title = element_text(child)
                elif name == "item":
                    items.append(self.decode_item(child))

        self.logger.info("Successfully parsed feed", items_count=len(items))
        return Channel(title=title, items=tuple(items))

    def decode_item(self, elem: ET.Element) -> Item:
        """Decode one <item> element, defaulting absent fields to ''."""
        values = dict.fromkeys(ITEM_FIELDS.values(), "")
        for child in elem:
            field_name = ITEM_FIELDS.get(local_name(child.tag))
            if field_name is not None:
                values[field_name] = element_text(child)
        return Item(**values)


def local_name(tag) -> str:
    """Strip any ``{namespace}`` prefix from an element tag."""
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def element_text(elem: ET.Element) -> str:
    """Return the character data directly inside ``elem``.

    Text of nested elements is skipped; text between them is kept.
    """
    parts = [elem.text or ""]
    parts.extend(child.tail or "" for child in elem)
    return "".join(parts)

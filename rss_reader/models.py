"""Data models for RSS Reader."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """Represents a single RSS channel item."""

    title: str = ""
    link: str = ""  # Populated from <guid>, not <link>
    description: str = ""
    date: str = ""  # Raw <pubDate> text, never parsed


@dataclass(frozen=True)
class Channel:
    """Represents the <channel> element of an RSS feed."""

    title: str = ""
    items: tuple[Item, ...] = field(default_factory=tuple)

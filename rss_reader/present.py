"""Plain-text rendering of parsed feeds."""

from typing import TextIO

from .models import Channel


def format_channel(channel: Channel) -> str:
    """Render a channel as the text block printed by the reader."""
    lines = [channel.title]
    for index, item in enumerate(channel.items, start=1):
        lines.append(f"    {index:2d}. {item.title}")
        lines.append(f"        {item.description}")
        lines.append(f"        {item.link}")
        lines.append(f"        {item.date}")
    return "\n".join(lines) + "\n"


def present(channel: Channel, stdout: TextIO) -> None:
    """Write the channel title followed by one numbered entry per item."""
    stdout.write(format_channel(channel))
    stdout.flush()

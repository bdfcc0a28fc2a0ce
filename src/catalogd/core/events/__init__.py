"""Change notification for catalog mutations."""

from catalogd.core.events.bus import ChangeEvent, ChangeFeed, StreamClosed
from catalogd.core.events.types import ChangeType

__all__ = [
    "ChangeEvent",
    "ChangeFeed",
    "ChangeType",
    "StreamClosed",
]

"""Track view for REAPER projects."""

from typing import Any, Callable, TypeVar

from reaper_save.errors import MissingAttributeError
from reaper_save.models.attribute import ReaperString
from reaper_save.models.item import Item, MediaSource
from reaper_save.models.wrapper import ObjectWrapper, children, modify_children

T = TypeVar("T")


class Track(ObjectWrapper):
    """A ``<TRACK`` block."""

    TAG = "TRACK"

    @property
    def name(self) -> str:
        """The value of the track's ``NAME`` line.

        Raises:
            MissingAttributeError: the track has no ``NAME`` line, or it is empty
        """
        line = self.inner.find_line("NAME")
        if line is None or not line.values:
            raise MissingAttributeError("NAME")
        value = line.values[0]
        if isinstance(value, ReaperString):
            return value.value
        from reaper_save.rpp.writer import write_attribute

        return write_attribute(value)

    def items(self) -> list[Item]:
        """Copies of the items on this track, in document order."""
        return children(self.inner, Item)

    def modify_items(self, modify: Callable[[Item], T]) -> list[T]:
        """Run ``modify`` on every item of this track, in place."""
        return modify_children(self.inner, Item, modify)

    def source_waves(self) -> list[MediaSource]:
        """Copies of the media sources of all items on this track."""
        return [
            source
            for item in self.items()
            for source in children(item.inner, MediaSource)
        ]

    def describe(self) -> dict[str, Any]:
        """Return a description dict."""
        line = self.inner.find_line("NAME")
        return {
            "name": self.name if line is not None and line.values else None,
            "item_count": len(self.items()),
            "items": [item.describe() for item in self.items()],
        }

    def to_description(self) -> str:
        """Human-readable description, e.g. ``PLATE, (2 items)``."""
        try:
            name = self.name
        except MissingAttributeError:
            name = "(unnamed)"
        return f"{name}, ({len(self.items())} items)"

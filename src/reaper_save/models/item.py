"""Media item and media source views."""

from typing import Any, Callable, TypeVar

from reaper_save.errors import BadParamCountError, InvalidAttributeTypeError
from reaper_save.models.attribute import AttributeKind, ReaperString
from reaper_save.models.wrapper import ObjectWrapper, first_child, modify_children

T = TypeVar("T")

FILE = "FILE"


class MediaSource(ObjectWrapper):
    """A ``<SOURCE ...`` block referencing a media file."""

    TAG = "SOURCE"

    @property
    def source_type(self) -> str | None:
        """The header argument, e.g. ``WAVE`` or ``VIDEO``."""
        values = self.inner.header.values
        if not values or not isinstance(values[0], ReaperString):
            return None
        return values[0].value

    @property
    def file(self) -> str | None:
        """The referenced file path, or None if the source has no ``FILE`` line.

        Raises:
            BadParamCountError: ``FILE`` does not hold exactly one value
            InvalidAttributeTypeError: ``FILE`` is not a string
        """
        if self.inner.find_line(FILE) is None:
            return None
        return self.inner.single_attribute(FILE, AttributeKind.STRING).value

    def set_file(self, path: str) -> bool:
        """Point the source at ``path``, keeping the original quoting where possible.

        Returns False (and changes nothing) if the source has no ``FILE`` line.
        Raises the same errors as :attr:`file`.
        """
        if self.inner.find_line(FILE) is None:
            return False
        current = self.inner.single_attribute(FILE, AttributeKind.STRING)
        self.inner.set_single_attribute(FILE, current.with_value(path))
        return True


class Item(ObjectWrapper):
    """An ``<ITEM`` block on a track."""

    TAG = "ITEM"

    def source_wave(self) -> MediaSource | None:
        """A copy of the first media source of this item."""
        return first_child(self.inner, MediaSource)

    def modify_source_waves(self, modify: Callable[[MediaSource], T]) -> list[T]:
        """Run ``modify`` on every media source of this item, in place."""
        return modify_children(self.inner, MediaSource, modify)

    def describe(self) -> dict[str, Any]:
        """Return a description dict. A malformed ``FILE`` line is reported as None."""
        source = self.source_wave()
        name = self.inner.find_line("NAME")
        file = None
        if source is not None:
            try:
                file = source.file
            except (BadParamCountError, InvalidAttributeTypeError):
                file = None
        return {
            "name": name.values[0].value if name and len(name.values) == 1 else None,
            "source_type": source.source_type if source else None,
            "file": file,
        }

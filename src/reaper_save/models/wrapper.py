"""Typed views over document tree objects.

A view wraps exactly one :class:`Object` whose header name equals the view's
``TAG`` and exposes a few named accessors. Everything the view does not know
about stays in the wrapped object untouched, so converting a view back with
:meth:`ObjectWrapper.into_object` loses nothing.
"""

import functools
import logging
from typing import Any, Callable, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from reaper_save.errors import EmptyProjectError, InvalidObjectError, SerializeError
from reaper_save.models.attribute import Attribute
from reaper_save.models.tree import Entry, Line, Object

logger = logging.getLogger(__name__)

T = TypeVar("T")
W = TypeVar("W", bound="ObjectWrapper")


class _FrozenLine(Line):
    model_config = ConfigDict(frozen=True)

    values: tuple[Attribute, ...] = ()


class _Placeholder(Object):
    model_config = ConfigDict(frozen=True)

    header: _FrozenLine
    values: tuple[Entry, ...] = ()


@functools.cache
def placeholder_object() -> Object:
    """The stand-in that occupies a slot while its object is converted.

    Built once. It is frozen and its value lists are tuples, so it cannot be
    modified through the slot it occupies.
    """
    return _Placeholder(header=_FrozenLine(name="DUMMY"))


def debug_format(view: "ObjectWrapper") -> str:
    """Render any view as its type name followed by its .rpp text.

    Falls back to the structural model repr when the object cannot be written.
    """
    from reaper_save.rpp.writer import serialize

    try:
        return f"{type(view).__name__}:\n{serialize(view.inner)}"
    except SerializeError:
        return f"{type(view).__name__}({view.inner!r})"


class ObjectWrapper(BaseModel):
    """Base class for the typed views."""

    TAG: ClassVar[str]

    inner: Object

    @model_validator(mode="after")
    def _check_tag(self) -> "ObjectWrapper":
        # Not a ValueError: pydantic lets it through unwrapped
        if self.inner.name != self.TAG:
            raise InvalidObjectError(expected=self.TAG, got=self.inner.name)
        return self

    @classmethod
    def from_object(cls: type[W], obj: Object) -> W:
        """Wrap ``obj``, raising :class:`InvalidObjectError` if its tag differs.

        On failure ``obj`` is left exactly as it was. Lines and anonymous
        parameters are rejected the same way.
        """
        if not isinstance(obj, Object):
            got = obj.name if isinstance(obj, Line) else type(obj).__name__
            raise InvalidObjectError(expected=cls.TAG, got=got)
        return cls(inner=obj)

    def into_object(self) -> Object:
        """Give back the wrapped object."""
        return self.inner

    @classmethod
    def matches(cls, entry: Entry) -> bool:
        """Whether ``entry`` is an object this view accepts."""
        return isinstance(entry, Object) and entry.name == cls.TAG

    @classmethod
    def modify_in_place(
        cls: type[W], entries: list[Entry], index: int, modify: Callable[[W], T]
    ) -> T:
        """Run ``modify`` on ``entries[index]`` as this view without copying it.

        The slot holds :func:`placeholder_object` while the object is taken out.
        If the conversion fails the original object goes back unchanged and the
        error propagates; otherwise the (possibly modified) object is put back,
        even when ``modify`` raises.
        """
        original = entries[index]
        entries[index] = placeholder_object()
        try:
            view = cls.from_object(original)
        except Exception:
            entries[index] = original
            raise
        try:
            return modify(view)
        finally:
            entries[index] = view.into_object()

    def __repr__(self) -> str:
        return debug_format(self)


def children(obj: Object, view: type[W]) -> list[W]:
    """Detached copies of all children of ``obj`` matching ``view``, in order."""
    return [
        view.from_object(entry.model_copy(deep=True))
        for entry in obj.values
        if view.matches(entry)
    ]


def first_child(obj: Object, view: type[W]) -> W | None:
    """A detached copy of the first child of ``obj`` matching ``view``."""
    for entry in obj.values:
        if view.matches(entry):
            return view.from_object(entry.model_copy(deep=True))
    return None


def modify_children(obj: Object, view: type[W], modify: Callable[[W], T]) -> list[T]:
    """Apply ``modify`` in place to every child matching ``view``; collect the results."""
    return [
        view.modify_in_place(obj.values, index, modify)
        for index, entry in enumerate(obj.values)
        if view.matches(entry)
    ]


def replace_children(
    obj: Object, view: type[W], transform: Callable[[list[W]], list[W]]
) -> None:
    """Pull every child matching ``view`` out, transform the list, put the result back.

    The returned views are inserted as one block where the first matching child
    used to be, or after the last child if nothing matched. All other children
    keep their order and position. A view returned more than once is inserted
    as independent copies.

    Raises:
        EmptyProjectError: ``obj`` has no children at all
    """
    if not obj.values:
        raise EmptyProjectError()
    anchor = next(
        (index for index, entry in enumerate(obj.values) if view.matches(entry)),
        len(obj.values),
    )
    extracted: list[W] = []
    kept: list[Entry] = []
    for entry in obj.values:
        if view.matches(entry):
            extracted.append(view.from_object(entry))
        else:
            kept.append(entry)
    replacement = transform(extracted)
    logger.debug(
        "replacing %d <%s> children of <%s> with %d at index %d",
        len(extracted), view.TAG, obj.name, len(replacement), anchor,
    )
    inserted: list[Object] = []
    seen: set[int] = set()
    for item in replacement:
        child = item.into_object()
        # A view returned twice must not put one object into two slots
        if id(child) in seen:
            child = child.model_copy(deep=True)
        seen.add(id(child))
        inserted.append(child)
    kept[anchor:anchor] = inserted
    obj.values = kept


def describe_children(obj: Object) -> dict[str, Any]:
    """Count the child objects of ``obj`` by tag."""
    counts: dict[str, int] = {}
    for child in obj.objects():
        counts[child.name] = counts.get(child.name, 0) + 1
    return counts

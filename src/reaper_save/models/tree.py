"""The generic, order-preserving document tree of an .rpp file.

Every block of a project file (``<NAME ...`` up to the matching ``>``) is an
:class:`Object`; every other statement is a :class:`Line`, except for untagged
payload lines (base64 plugin state and the like) which are kept as
:class:`AnonymousParameter`. Nothing is dropped, so a parsed tree can be
written back out after editing a few known fields.
"""

from typing import Annotated, Iterator, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from reaper_save.errors import (
    BadParamCountError, InvalidAttributeTypeError, NoSuchParameterError,
)
from reaper_save.models.attribute import Attribute, AttributeKind


BASE64_SYMBOLS = frozenset("+/=")


def is_name_char(c: str) -> bool:
    """Characters allowed in an attribute name: uppercase letters, digits and ``_``."""
    return (c.isalpha() and c.isupper()) or c.isnumeric() or c == "_"


def is_anonymous_char(c: str) -> bool:
    """Characters allowed in an anonymous parameter line."""
    return c.isalnum() or c in BASE64_SYMBOLS


def _check_attribute_name(name: str) -> str:
    if not name or not all(is_name_char(c) for c in name):
        raise ValueError(f"invalid attribute name: {name!r}")
    return name


def _check_anonymous_value(value: str) -> str:
    if not value or not all(is_anonymous_char(c) for c in value):
        raise ValueError(f"invalid anonymous parameter: {value!r}")
    return value


AttributeName = Annotated[str, AfterValidator(_check_attribute_name)]


class Line(BaseModel):
    """A named statement with zero or more values, e.g. ``VOLPAN 1 0 1 -1``."""

    name: AttributeName
    values: list[Attribute] = Field(default_factory=list)


class AnonymousParameter(BaseModel):
    """An untagged payload line."""

    model_config = ConfigDict(frozen=True)

    value: Annotated[str, AfterValidator(_check_anonymous_value)]


class Object(BaseModel):
    """A ``<NAME ...`` block: a header line plus ordered child entries."""

    header: Line
    values: list["Entry"] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.header.name

    def objects(self) -> Iterator["Object"]:
        """Iterate over the child objects."""
        return (entry for entry in self.values if isinstance(entry, Object))

    def lines(self) -> Iterator[Line]:
        """Iterate over the child lines."""
        return (entry for entry in self.values if isinstance(entry, Line))

    def child_object(self, name: str) -> "Object | None":
        """Return the first child object named ``name``."""
        for obj in self.objects():
            if obj.name == name:
                return obj
        return None

    def find_line(self, name: str) -> Line | None:
        """Return the first child line named ``name``."""
        for line in self.lines():
            if line.name == name:
                return line
        return None

    def attributes(self, name: str) -> list[Attribute] | None:
        """Return the (mutable) value list of the first line named ``name``."""
        line = self.find_line(name)
        return None if line is None else line.values

    def single_attribute(self, name: str, kind: AttributeKind | None = None) -> Attribute:
        """Return the only value of the line ``name``.

        Raises:
            NoSuchParameterError: there is no such line
            BadParamCountError: the line does not hold exactly one value
            InvalidAttributeTypeError: ``kind`` is given and the value is of another kind
        """
        values = self.attributes(name)
        if values is None:
            raise NoSuchParameterError(name)
        if len(values) != 1:
            raise BadParamCountError(name, expected=1, found=len(values))
        value = values[0]
        if kind is not None and value.kind is not kind:
            raise InvalidAttributeTypeError(name, expected=kind, found=value.kind)
        return value

    def set_single_attribute(self, name: str, value: Attribute) -> Attribute:
        """Replace the only value of the line ``name``, returning the old one.

        Raises the same errors as :meth:`single_attribute`; the kind of the new
        value must match the kind of the old one.
        """
        old = self.single_attribute(name, value.kind)
        self.attributes(name)[0] = value
        return old


Entry = Union[Object, Line, AnonymousParameter]

Object.model_rebuild()

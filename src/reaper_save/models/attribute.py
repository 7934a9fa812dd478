"""Scalar values that appear as arguments of .rpp lines."""

import functools
import math
from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


class AttributeKind(str, Enum):
    """The scalar variants of the format."""

    UID = "uid"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    UNUMBER = "unumber"


class Quote(str, Enum):
    """How a string value was (or will be) quoted."""

    DOUBLE = '"'
    SINGLE = "'"
    NONE = ""


class Uid(BaseModel):
    """A braced identifier like ``{A365E92F-3BF8-24E8-1FF4-8FDF30208BCB}``."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[AttributeKind] = AttributeKind.UID

    value: str = Field(pattern=r"^[0-9A-Fa-f-]*$", description="Text between the braces")


class ReaperString(BaseModel):
    """A string value together with the quoting it is written with."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[AttributeKind] = AttributeKind.STRING

    value: str = Field(description="Payload without quotes")
    quote: Quote = Field(default=Quote.NONE, description="Quote style")

    @model_validator(mode="after")
    def _check_renderable(self) -> "ReaperString":
        if "\r" in self.value or "\n" in self.value:
            raise ValueError("string values cannot contain line breaks")
        if self.quote is Quote.NONE:
            if any(c.isspace() for c in self.value):
                raise ValueError(f"unquoted string cannot contain whitespace: {self.value!r}")
        elif self.quote.value in self.value:
            raise ValueError(f"{self.quote.name.lower()}-quoted string cannot contain {self.quote.value}")
        return self

    @classmethod
    def double(cls, value: str) -> "ReaperString":
        return cls(value=value, quote=Quote.DOUBLE)

    @classmethod
    def single(cls, value: str) -> "ReaperString":
        return cls(value=value, quote=Quote.SINGLE)

    @classmethod
    def unquoted(cls, value: str) -> "ReaperString":
        return cls(value=value, quote=Quote.NONE)

    def with_value(self, value: str) -> "ReaperString":
        """Return a string carrying ``value``, keeping the quote style if it can render it."""
        if self.quote is Quote.NONE:
            fits = value != "" and not any(c.isspace() for c in value)
        else:
            fits = self.quote.value not in value
        if fits:
            return ReaperString(value=value, quote=self.quote)
        if '"' not in value:
            return ReaperString.double(value)
        return ReaperString.single(value)

    def __str__(self) -> str:
        return self.value


class _Number(BaseModel):
    """Shared behaviour of the numeric variants.

    ``text`` is the spelling the number was read with. The writer reuses it so
    that ``+5`` or ``1.0`` are written back as they were found. It takes no part
    in equality or hashing.
    """

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, exclude=True, repr=False)

    def _key(self) -> Any:
        return self.value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class Int(_Number):
    """A plain signed 64-bit integer."""

    kind: ClassVar[AttributeKind] = AttributeKind.INT

    value: int = Field(ge=I64_MIN, le=I64_MAX)


class UNumber(_Number):
    """A signed 64-bit integer written with a ``:U`` suffix, e.g. ``-1:U``."""

    kind: ClassVar[AttributeKind] = AttributeKind.UNUMBER

    value: int = Field(ge=I64_MIN, le=I64_MAX)


@functools.total_ordering
class Float(_Number):
    """A 64-bit float compared by total order: NaN equals NaN and sorts last."""

    kind: ClassVar[AttributeKind] = AttributeKind.FLOAT

    value: float

    def _key(self) -> tuple[int, float]:
        if math.isnan(self.value):
            return (1, 0.0)
        return (0, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self._key() < other._key()


Attribute = Union[Uid, ReaperString, Int, Float, UNumber]

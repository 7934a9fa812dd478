"""Write the document tree back to REAPER .rpp text."""

import io
import math
from decimal import Decimal
from typing import TextIO

from reaper_save.errors import SerializeError
from reaper_save.models.attribute import (
    Attribute, Float, Int, Quote, ReaperString, Uid, UNumber,
)
from reaper_save.models.project import ReaperProject
from reaper_save.models.tree import AnonymousParameter, Entry, Line, Object
from reaper_save.rpp.parser import INDENT_SPACES


# REAPER writes CRLF regardless of platform
NEWLINE = "\r\n"


def format_float(value: float) -> str:
    """Shortest positional decimal for ``value``: ``1.0`` -> ``1``, ``1e20`` -> ``100000000000000000000``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def write_attribute(value: Attribute) -> str:
    """Render one scalar value."""
    if isinstance(value, Uid):
        return f"{{{value.value}}}"
    if isinstance(value, ReaperString):
        if value.quote is Quote.NONE:
            return value.value
        return f"{value.quote.value}{value.value}{value.quote.value}"
    if isinstance(value, UNumber):
        return f"{value.text if value.text is not None else value.value}:U"
    if isinstance(value, Int):
        return value.text if value.text is not None else str(value.value)
    if isinstance(value, Float):
        return value.text if value.text is not None else format_float(value.value)
    raise TypeError(f"not an attribute: {value!r}")


def _emit(out: TextIO, chunk: str) -> None:
    try:
        out.write(chunk)
    except (OSError, ValueError) as err:
        raise SerializeError(f"Writing value failed: {chunk[:40]!r}") from err


def _indent(indent: int) -> str:
    return " " * (INDENT_SPACES * indent)


def write_line(line: Line, out: TextIO, indent: int = 0) -> None:
    _emit(out, _indent(indent) + " ".join([line.name, *map(write_attribute, line.values)]))


def write_anonymous_parameter(param: AnonymousParameter, out: TextIO, indent: int = 0) -> None:
    _emit(out, _indent(indent) + param.value)


def write_object(obj: Object, out: TextIO, indent: int = 0) -> None:
    """Write ``obj`` and its children; the closing ``>`` gets no newline."""
    _emit(out, _indent(indent) + "<")
    write_line(obj.header, out, 0)
    _emit(out, NEWLINE)
    for entry in obj.values:
        write_entry(entry, out, indent + 1)
        _emit(out, NEWLINE)
    _emit(out, _indent(indent) + ">")


def write_entry(entry: Entry, out: TextIO, indent: int = 0) -> None:
    if isinstance(entry, Object):
        write_object(entry, out, indent)
    elif isinstance(entry, Line):
        write_line(entry, out, indent)
    else:
        write_anonymous_parameter(entry, out, indent)


def serialize(node: Entry, indent: int = 0) -> str:
    """Render a single node without a trailing newline."""
    out = io.StringIO()
    write_entry(node, out, indent)
    return out.getvalue()


def to_string(root: Object) -> str:
    """Render a whole document, terminated by a newline."""
    return serialize(root) + NEWLINE


def write_project(project: ReaperProject) -> str:
    """Render a project back to .rpp text.

    Args:
        project: Project to write

    Returns:
        The document text, ready to be written to disk
    """
    return to_string(project.into_object())

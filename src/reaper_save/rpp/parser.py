"""Parse REAPER .rpp project text into the document tree.

The grammar is a recursive descent over the raw text. The nesting depth is
passed down explicitly: a child of an object at depth ``d`` must be indented
by exactly ``INDENT_SPACES * (d + 1)`` spaces. Every production either returns
``(value, new_offset)`` or raises :class:`GrammarError`; ordered choices
collect the failures of all alternatives so the final report shows what was
tried where.

Quoted strings end at the first matching quote and never span a line break;
a quote that is not closed on its own line makes the token an unquoted string.
"""

import logging
import re
from typing import Callable

from reaper_save.errors import GrammarError, ParseError
from reaper_save.models.attribute import (
    I64_MAX, I64_MIN, Attribute, Float, Int, Quote, ReaperString, Uid, UNumber,
)
from reaper_save.models.project import ReaperProject
from reaper_save.models.tree import (
    AnonymousParameter, Entry, Line, Object, is_anonymous_char, is_name_char,
)

logger = logging.getLogger(__name__)


INDENT_SPACES = 2

_TOKEN = re.compile(r"\S*")
_UID = re.compile(r"\{([0-9A-Fa-f-]*)\}(?=\s|\Z)")
_DOUBLE_QUOTED = re.compile(r'"([^"\r\n]*)"(?=\s|\Z)')
_SINGLE_QUOTED = re.compile(r"'([^'\r\n]*)'(?=\s|\Z)")
_INT = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_UNUMBER = re.compile(r"([-0-9]*):U(?=\s|\Z)")

ScalarParser = Callable[[str, int], "tuple[Attribute, int] | None"]


def _parse_int_literal(literal: str) -> int | None:
    if not _INT.fullmatch(literal):
        return None
    value = int(literal)
    if not I64_MIN <= value <= I64_MAX:
        return None
    return value


def _uid(text: str, pos: int) -> tuple[Attribute, int] | None:
    match = _UID.match(text, pos)
    if match is None:
        return None
    return Uid(value=match.group(1)), match.end()


def _quoted(pattern: re.Pattern, quote: Quote) -> ScalarParser:
    def parse(text: str, pos: int) -> tuple[Attribute, int] | None:
        match = pattern.match(text, pos)
        if match is None:
            return None
        return ReaperString(value=match.group(1), quote=quote), match.end()
    return parse


def _int(text: str, pos: int) -> tuple[Attribute, int] | None:
    token = _TOKEN.match(text, pos).group()
    value = _parse_int_literal(token)
    if value is None:
        return None
    return Int(value=value, text=token), pos + len(token)


def _float(text: str, pos: int) -> tuple[Attribute, int] | None:
    token = _TOKEN.match(text, pos).group()
    if not token or not _FLOAT.fullmatch(token):
        return None
    return Float(value=float(token), text=token), pos + len(token)


def _unumber(text: str, pos: int) -> tuple[Attribute, int] | None:
    match = _UNUMBER.match(text, pos)
    if match is None:
        return None
    value = _parse_int_literal(match.group(1))
    if value is None:
        return None
    return UNumber(value=value, text=match.group(1)), match.end()


def _unquoted(text: str, pos: int) -> tuple[Attribute, int] | None:
    token = _TOKEN.match(text, pos).group()
    return ReaperString(value=token, quote=Quote.NONE), pos + len(token)


# The order is part of the format: a bare token is an Int before it is a Float,
# and the unquoted fallback accepts anything, so it has to stay last.
SCALAR_ALTERNATIVES: tuple[tuple[str, ScalarParser], ...] = (
    ("uid", _uid),
    ("double-quoted string", _quoted(_DOUBLE_QUOTED, Quote.DOUBLE)),
    ("single-quoted string", _quoted(_SINGLE_QUOTED, Quote.SINGLE)),
    ("integer", _int),
    ("float", _float),
    ("u-number", _unumber),
    ("unquoted string", _unquoted),
)


def parse_attribute(text: str, pos: int) -> tuple[Attribute, int]:
    """Parse one scalar value at ``pos``, trying :data:`SCALAR_ALTERNATIVES` in order."""
    for _, alternative in SCALAR_ALTERNATIVES:
        result = alternative(text, pos)
        if result is not None:
            return result
    raise GrammarError(
        "Attribute", pos, " or ".join(name for name, _ in SCALAR_ALTERNATIVES)
    )


def deserialize_attribute(text: str) -> tuple[str, Attribute]:
    """Parse a scalar at the start of ``text`` and return ``(remaining, value)``."""
    try:
        value, pos = parse_attribute(text, 0)
    except GrammarError as err:
        raise ParseError(err.format_trace(text)) from err
    return text[pos:], value


def parse_indent(text: str, pos: int, depth: int) -> int:
    width = depth * INDENT_SPACES
    if not text.startswith(" " * width, pos):
        raise GrammarError("indentation", pos, f"{width} spaces")
    return pos + width


def parse_newline(text: str, pos: int) -> int:
    if text.startswith("\r\n", pos):
        return pos + 2
    if text.startswith("\n", pos):
        return pos + 1
    raise GrammarError("newline", pos, "'\\r\\n' or '\\n'")


def _expect(text: str, pos: int, literal: str, production: str) -> int:
    if not text.startswith(literal, pos):
        raise GrammarError(production, pos, repr(literal))
    return pos + len(literal)


def parse_line(text: str, pos: int, depth: int) -> tuple[Line, int]:
    """Parse ``NAME value value ...`` without the line terminator."""
    pos = parse_indent(text, pos, depth)
    end = pos
    while end < len(text) and is_name_char(text[end]):
        end += 1
    if end == pos:
        raise GrammarError("Line", pos, "attribute name")
    name = text[pos:end]
    pos = end
    values = []
    while text.startswith(" ", pos):
        value, pos = parse_attribute(text, pos + 1)
        values.append(value)
    return Line(name=name, values=values), pos


def parse_anonymous_parameter(text: str, pos: int, depth: int) -> tuple[AnonymousParameter, int]:
    pos = parse_indent(text, pos, depth)
    end = pos
    while end < len(text) and is_anonymous_char(text[end]):
        end += 1
    if end == pos:
        raise GrammarError("AnonymousParameter", pos, "base64 or alphanumeric characters")
    return AnonymousParameter(value=text[pos:end]), end


def parse_object(text: str, pos: int, depth: int) -> tuple[Object, int]:
    """Parse a ``<HEADER ...`` block up to and including its closing ``>``."""
    start = pos
    try:
        pos = parse_indent(text, pos, depth)
        pos = _expect(text, pos, "<", "object initializer")
        header, pos = parse_line(text, pos, 0)
        pos = parse_newline(text, pos)
    except GrammarError as err:
        raise GrammarError("Object", start, "object header", (err,)) from None

    values: list[Entry] = []
    while True:
        try:
            entry, pos = parse_entry(text, pos, depth + 1)
        except GrammarError as err:
            stopped_by = err
            break
        values.append(entry)

    try:
        pos = parse_indent(text, pos, depth)
        pos = _expect(text, pos, ">", "object terminator")
    except GrammarError as err:
        raise GrammarError(
            f"Object <{header.name}>", start, "a child entry or the closing '>'",
            (stopped_by, err),
        ) from None
    return Object(header=header, values=values), pos


_ENTRY_ALTERNATIVES = (
    ("object entry", parse_object),
    ("line entry", parse_line),
    ("anonymous parameter entry", parse_anonymous_parameter),
)


def parse_entry(text: str, pos: int, depth: int) -> tuple[Entry, int]:
    """Parse one child entry followed by its newline.

    Objects are tried first: a ``<`` line must never be read as something else.
    """
    failures = []
    for name, alternative in _ENTRY_ALTERNATIVES:
        try:
            entry, end = alternative(text, pos, depth)
            end = parse_newline(text, end)
        except GrammarError as err:
            failures.append(GrammarError(name, pos, "entry ending in a newline", (err,)))
            continue
        return entry, end
    raise GrammarError("Entry", pos, "object, line or anonymous parameter", tuple(failures))


def parse_document(text: str) -> Object:
    """Parse a whole document into its root :class:`Object`.

    Raises:
        ParseError: the text does not follow the grammar
    """
    try:
        root, pos = parse_object(text, 0, 0)
        if text[pos:].strip():
            raise GrammarError("Document", pos, "end of input after the root object")
    except GrammarError as err:
        raise ParseError(err.format_trace(text)) from err
    logger.debug("parsed <%s> with %d entries", root.name, len(root.values))
    return root


def parse_project(text: str) -> ReaperProject:
    """Parse project text and check that its root is a ``REAPER_PROJECT``.

    Args:
        text: Contents of an .rpp file

    Returns:
        Parsed ReaperProject

    Raises:
        ParseError: the text does not follow the grammar
        InvalidObjectError: the root object is not a project
    """
    return ReaperProject.from_object(parse_document(text))

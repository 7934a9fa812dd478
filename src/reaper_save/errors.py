"""Errors raised while reading, writing and inspecting REAPER project files."""

from typing import Any


class ReaperSaveError(Exception):
    """Base class for every error raised by reaper_save."""


class GrammarError(ReaperSaveError):
    """A production of the .rpp grammar did not match.

    Failures nest: ``causes`` holds the failures of the alternatives or
    sub-productions that were tried below this one, so the whole error is a
    tree that mirrors the recursive descent.
    """

    def __init__(
        self,
        production: str,
        offset: int,
        expected: str,
        causes: tuple["GrammarError", ...] = (),
    ):
        super().__init__(f"{production}: expected {expected} at offset {offset}")
        self.production = production
        self.offset = offset
        self.expected = expected
        self.causes = causes

    def format_trace(self, text: str) -> str:
        """Render the failure tree with line/column positions into ``text``."""
        lines: list[str] = []
        self._format(text, 0, lines)
        return "\n".join(lines)

    def _format(self, text: str, depth: int, lines: list[str]) -> None:
        line_no = text.count("\n", 0, self.offset) + 1
        column = self.offset - (text.rfind("\n", 0, self.offset) + 1) + 1
        snippet = text[self.offset:self.offset + 20].split("\n", 1)[0]
        lines.append(
            f"{'  ' * depth}in {self.production} at {line_no}:{column}: "
            f"expected {self.expected}, found {snippet!r}"
        )
        for cause in self.causes:
            cause._format(text, depth + 1, lines)


class ParseError(ReaperSaveError):
    """A document could not be parsed. ``report`` holds the formatted trace."""

    def __init__(self, report: str):
        super().__init__(f"Failed to parse:\n{report}")
        self.report = report


class SerializeError(ReaperSaveError):
    """The output sink rejected a write."""


class InvalidObjectError(ReaperSaveError):
    """An object was converted into a view with a different tag."""

    def __init__(self, expected: str, got: str):
        super().__init__(f"Expected [{expected}], got [{got}]")
        self.expected = expected
        self.got = got


class EmptyProjectError(ReaperSaveError):
    """Children cannot be reinserted into an object that has none to anchor to."""

    def __init__(self) -> None:
        super().__init__(
            "This is an empty project and there is no position to insert children at."
        )


class MissingAttributeError(ReaperSaveError):
    """A view expected a named line that the object does not have."""

    def __init__(self, attribute: str):
        super().__init__(f"Expected attribute {attribute!r} is missing.")
        self.attribute = attribute


class NoSuchParameterError(ReaperSaveError):
    """``Object.single_attribute`` found no line with the given name."""

    def __init__(self, param: str):
        super().__init__(f"Param {param} not found in object")
        self.param = param


class BadParamCountError(ReaperSaveError):
    """A line holds a different number of values than was expected."""

    def __init__(self, param: str, expected: int, found: int):
        super().__init__(
            f"Expected object parameter {param} to have {expected} attributes, "
            f"but it has {found}"
        )
        self.param = param
        self.expected = expected
        self.found = found


class InvalidAttributeTypeError(ReaperSaveError):
    """A value had a different scalar kind than the field requires."""

    def __init__(self, field: str, expected: Any, found: Any):
        super().__init__(
            f"Invalid attribute kind for [{field}]: expected [{expected}], found [{found}]"
        )
        self.field = field
        self.expected = expected
        self.found = found

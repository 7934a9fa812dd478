"""Reading and writing REAPER .rpp project text."""

from reaper_save.rpp.parser import parse_document, parse_project
from reaper_save.rpp.writer import to_string, write_project

__all__ = ["parse_document", "parse_project", "to_string", "write_project"]

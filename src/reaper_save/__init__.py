"""Lossless reading and editing of REAPER .rpp project files."""

from reaper_save.models import Item, MediaSource, Object, ReaperProject, Track
from reaper_save.rpp import parse_project, write_project

__all__ = [
    "Item",
    "MediaSource",
    "Object",
    "ReaperProject",
    "Track",
    "parse_project",
    "write_project",
]

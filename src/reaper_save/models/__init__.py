"""Pydantic models for the REAPER project document and its typed views."""

from reaper_save.models.attribute import (
    Attribute, AttributeKind, Float, Int, Quote, ReaperString, Uid, UNumber,
)
from reaper_save.models.tree import AnonymousParameter, Entry, Line, Object
from reaper_save.models.wrapper import ObjectWrapper
from reaper_save.models.item import Item, MediaSource
from reaper_save.models.track import Track
from reaper_save.models.project import ReaperProject

__all__ = [
    "Attribute",
    "AttributeKind",
    "Float",
    "Int",
    "Quote",
    "ReaperString",
    "Uid",
    "UNumber",
    "AnonymousParameter",
    "Entry",
    "Line",
    "Object",
    "ObjectWrapper",
    "Item",
    "MediaSource",
    "Track",
    "ReaperProject",
]

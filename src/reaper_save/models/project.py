"""Project view for REAPER projects."""

from typing import Any, Callable

from reaper_save.models.track import Track
from reaper_save.models.wrapper import ObjectWrapper, children, describe_children, replace_children


class ReaperProject(ObjectWrapper):
    """The ``<REAPER_PROJECT`` root of an .rpp document."""

    TAG = "REAPER_PROJECT"

    def tracks(self) -> list[Track]:
        """Copies of all tracks, in document order."""
        return children(self.inner, Track)

    def modify_tracks(self, modify: Callable[[list[Track]], list[Track]]) -> None:
        """Take all tracks out, pass them to ``modify`` and put its result back.

        The new tracks take the place of the old block of tracks; every other
        entry of the project stays where it was.

        Raises:
            EmptyProjectError: the project has no entries at all
        """
        replace_children(self.inner, Track, modify)

    def describe(self) -> dict[str, Any]:
        """Return a summary dict."""
        tracks = self.tracks()
        return {
            "version": [v.value for v in self.inner.header.values],
            "track_count": len(tracks),
            "item_count": sum(len(t.items()) for t in tracks),
            "objects": describe_children(self.inner),
        }

    def to_description(self) -> str:
        """Human-readable listing of the tracks."""
        tracks = self.tracks()
        lines = [f"Project: {len(tracks)} tracks"]
        for index, track in enumerate(tracks, start=1):
            lines.append(f"  {index}. {track.to_description()}")
        return "\n".join(lines)

"""Copy tracks from one REAPER project into another.

Media sources of a project usually reference their files relative to the
project's own directory. Before tracks can be moved into a project that lives
somewhere else, those paths are resolved against the source project's
directory; absolute paths are left alone.
"""

import logging
from pathlib import Path, PurePosixPath, PureWindowsPath

from reaper_save.models.item import Item, MediaSource
from reaper_save.models.project import ReaperProject
from reaper_save.models.track import Track

logger = logging.getLogger(__name__)


def is_absolute_media_path(path: str) -> bool:
    """Whether ``path`` is absolute in either POSIX or Windows form."""
    return PurePosixPath(path).is_absolute() or PureWindowsPath(path).is_absolute()


def resolve_media_path(path: str, base_dir: Path) -> str:
    """Return ``path`` unchanged if absolute, otherwise joined onto ``base_dir``."""
    if is_absolute_media_path(path):
        return path
    return str(base_dir / path)


def rebase_media_paths(track: Track, base_dir: Path) -> list[tuple[str, str]]:
    """Rewrite the relative media paths of ``track`` to point into ``base_dir``.

    Args:
        track: Track to modify in place
        base_dir: Directory the paths are currently relative to

    Returns:
        List of ``(old, new)`` pairs for every path that was changed
    """
    changed: list[tuple[str, str]] = []

    def rebase_source(source: MediaSource) -> None:
        current = source.file
        if current is None:
            return
        corrected = resolve_media_path(current, base_dir)
        if corrected != current:
            logger.info("correcting path [%s] -> [%s]", current, corrected)
            source.set_file(corrected)
            changed.append((current, corrected))

    def rebase_item(item: Item) -> None:
        item.modify_source_waves(rebase_source)

    track.modify_items(rebase_item)
    return changed


def import_tracks(
    target: ReaperProject,
    tracks: list[Track],
    source_dir: Path | None = None,
) -> None:
    """Append copies of ``tracks`` after the existing tracks of ``target``.

    Args:
        target: Project receiving the tracks, modified in place
        tracks: Tracks to copy; they are not modified
        source_dir: Directory of the project the tracks come from. When given,
            relative media paths are resolved against it.

    Raises:
        EmptyProjectError: ``target`` has no entries to anchor the tracks to
    """
    copies = [track.model_copy(deep=True) for track in tracks]
    if source_dir is not None:
        for track in copies:
            rebase_media_paths(track, source_dir)
    logger.info("importing %d tracks", len(copies))
    target.modify_tracks(lambda existing: existing + copies)

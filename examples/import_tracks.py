#!/usr/bin/env python3
"""Copy all tracks of one REAPER project into another."""

import logging
from pathlib import Path

from reaper_save.importer import import_tracks
from reaper_save.rpp import parse_project, write_project


def merge_projects(source_path: Path, target_path: Path, output_path: Path) -> None:
    """Append the tracks of ``source_path`` to ``target_path`` and save the result."""
    source = parse_project(source_path.read_text(encoding="utf-8"))
    target = parse_project(target_path.read_text(encoding="utf-8"))

    print(source.to_description())

    # Media paths of the source are relative to its own directory
    import_tracks(target, source.tracks(), source_dir=source_path.resolve().parent)

    # newline="" keeps the CRLF line endings as written
    output_path.write_text(write_project(target), encoding="utf-8", newline="")
    print(f"Wrote merged project: {output_path}")
    print("\n" + target.to_description())


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if len(sys.argv) < 3:
        sys.exit("usage: import_tracks.py SOURCE.rpp TARGET.rpp [OUTPUT.rpp]")
    output = Path(sys.argv[3]) if len(sys.argv) > 3 else Path("merged.rpp")
    merge_projects(Path(sys.argv[1]), Path(sys.argv[2]), output)

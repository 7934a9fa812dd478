"""Tests for copying tracks between projects."""

import logging
from pathlib import Path, PurePosixPath

import pytest

from reaper_save.errors import EmptyProjectError
from reaper_save.importer import (
    import_tracks, is_absolute_media_path, rebase_media_paths, resolve_media_path,
)
from reaper_save.models import Line, Object, ReaperProject
from reaper_save.rpp.writer import write_project


class TestResolveMediaPath:
    @pytest.mark.parametrize("path", [
        "/home/user/takes/take2.wav",
        "C:\\Users\\me\\audio.wav",
        "\\\\server\\share\\audio.wav",
    ])
    def test_absolute_is_kept(self, path):
        assert is_absolute_media_path(path)
        assert resolve_media_path(path, Path("/projects/song")) == path

    def test_relative_is_joined(self):
        resolved = resolve_media_path("video-recordings/clip.mov", Path("/projects/song"))
        assert PurePosixPath(resolved) == PurePosixPath("/projects/song/video-recordings/clip.mov")


class TestRebaseMediaPaths:
    def test_changes_relative_paths_only(self, project):
        track = project.tracks()[1]
        changed = rebase_media_paths(track, Path("/projects/song"))

        assert len(changed) == 1
        old, new = changed[0]
        assert old == "audio-files\\straszna istota - sama gitara - 1.wav"
        assert new == str(Path("/projects/song") / old)

        files = [s.file for s in track.source_waves()]
        assert files == [new, "/home/user/takes/take2.wav"]

    def test_logs_corrections(self, project, caplog):
        track = project.tracks()[0]
        with caplog.at_level(logging.INFO, logger="reaper_save.importer"):
            rebase_media_paths(track, Path("/projects/song"))

        assert "correcting path [video-recordings/barbarah-anne.mov]" in caplog.text

    def test_source_without_file(self):
        from reaper_save.models import Track

        track = Track.from_object(Object(
            header=Line(name="TRACK"),
            values=[Object(
                header=Line(name="ITEM"),
                values=[Object(header=Line(name="SOURCE"))],
            )],
        ))
        assert rebase_media_paths(track, Path("/projects")) == []


class TestImportTracks:
    """Tests for import_tracks."""

    def test_appends_after_existing(self, project, target_project):
        import_tracks(target_project, project.tracks())

        assert [t.name for t in target_project.tracks()] == ["Drums", "PLATE", "GTX PRZEMEK"]
        names = [entry.name for entry in target_project.inner.values]
        assert names == ["TEMPO", "TRACK", "TRACK", "TRACK", "EXTENSIONS"]

    def test_source_is_untouched(self, project, project_text, target_project):
        tracks = project.tracks()
        import_tracks(target_project, tracks, source_dir=Path("/projects/song"))

        assert tracks[1].source_waves()[0].file.startswith("audio-files")
        assert write_project(project) == project_text

    def test_rebases_with_source_dir(self, project, target_project):
        import_tracks(target_project, project.tracks(), source_dir=Path("/projects/song"))

        imported = target_project.tracks()[1]
        source = imported.items()[0].source_wave()
        assert source.file == str(Path("/projects/song") / "video-recordings/barbarah-anne.mov")

    def test_written_result_parses(self, project, target_project):
        from reaper_save.rpp.parser import parse_project

        import_tracks(target_project, project.tracks(), source_dir=Path("/projects/song"))
        reparsed = parse_project(write_project(target_project))

        assert reparsed.to_description() == target_project.to_description()

    def test_empty_target(self, project):
        target = ReaperProject.from_object(Object(header=Line(name="REAPER_PROJECT")))
        with pytest.raises(EmptyProjectError):
            import_tracks(target, project.tracks())

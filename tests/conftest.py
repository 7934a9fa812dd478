"""Pytest fixtures for reaper_save tests."""

import pytest

from reaper_save.rpp.parser import parse_document, parse_project


PROJECT_TEXT = r"""<REAPER_PROJECT 0.1 "6.80/linux-x86_64" 1691227194
  RIPPLE 0
  <RENDER_CFG
    ZXZhdxgAAQ==
  >
  TEMPO 120 4 4
  <TRACK {7E81B987-2285-6CDD-D836-6728BF78773C}
    NAME PLATE
    VOLPAN 2.15306599269332 0 -1 -1 1
    AUXRECV 0 0 1 0 0 0 0 0 0 -1:U 0 -1 ''
    <FXCHAIN
      SHOW 0
      <VST "VST: ReaComp (Cockos)" reacomp.dll 0 "" 1919247213<5653547265636D726561636F6D700000> ""
        bWNlcu9e7f4EAAAAAQAAAAAAAAACAAAAAAAAAAQAAAAAAAAACAAAAAAAAAACAAAAAQAAAAAAAAACAAAAAAAAAFwAAAAAAAAAAAAAAA==
        AHN0b2NrIC0gQWNvdXN0aWMgR3VpdGFyAAAAAAA=
      >
      FXID {82FE96D9-2141-2257-083F-F201758870C5}
    >
    <ITEM
      POSITION 0
      LENGTH 188.04
      NAME barbarah-anne.mov
      <SOURCE VIDEO
        FILE "video-recordings/barbarah-anne.mov"
      >
    >
  >
  <TRACK {C7D7917F-D94F-ED85-1D58-2F258596E414}
    NAME "GTX PRZEMEK"
    VOLPAN 0.45309238622556 0 -1 -1 1
    <ITEM
      POSITION 0
      LENGTH 179.18850340136058
      NAME "straszna istota - sama gitara - 1.wav"
      <SOURCE WAVE
        FILE "audio-files\straszna istota - sama gitara - 1.wav"
      >
    >
    <ITEM
      POSITION 179.5
      <SOURCE WAVE
        FILE /home/user/takes/take2.wav
      >
    >
  >
  <EXTENSIONS
  >
>
""".replace("\n", "\r\n")


TARGET_TEXT = r"""<REAPER_PROJECT 0.1 "7.0/win64" 1700000000
  TEMPO 90 4 4
  <TRACK {11111111-2222-3333-4444-555555555555}
    NAME Drums
  >
  <EXTENSIONS
  >
>
""".replace("\n", "\r\n")


@pytest.fixture
def project_text():
    """Text of a small but realistic project with two tracks."""
    return PROJECT_TEXT


@pytest.fixture
def project(project_text):
    """The parsed sample project."""
    return parse_project(project_text)


@pytest.fixture
def target_project():
    """A second project with a single track, used as an import target."""
    return parse_project(TARGET_TEXT)


@pytest.fixture
def track_object(project_text):
    """The raw object of the first track of the sample project."""
    root = parse_document(project_text)
    return next(obj for obj in root.objects() if obj.name == "TRACK")

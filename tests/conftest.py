"""Shared test fixtures for the vtt_converter test suite.

WHY: Parser, converter, CLI, and API tests all exercise the same kinds of
input: a realistic VTT file with a header block, identifiers, cue
settings, and multi-line text, plus its known SRT rendering. Keeping them
here means every layer is checked against the same expected output.

RULES:
- SAMPLE_SRT is the exact expected conversion of SAMPLE_VTT
- Fixtures return fresh strings; tests may not rely on shared state
"""

from pathlib import Path

import pytest


SAMPLE_VTT = (
    "WEBVTT\n"
    "Kind: captions\n"
    "Language: en\n"
    "\n"
    "intro\n"
    "00:00:01.000 --> 00:00:03.250 align:start position:10%\n"
    "Hello there.\n"
    "\n"
    "00:03.500 --> 00:05.000\n"
    "<v Alice>Two lines</v>\n"
    "of text\n"
    "\n"
    "\n"
    "1:02:03.004 --> 1:02:04.005\n"
    "Late cue\n"
)

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:03,250\n"
    "Hello there.\n"
    "\n"
    "2\n"
    "00:00:03,500 --> 00:00:05,000\n"
    "<v Alice>Two lines</v>\n"
    "of text\n"
    "\n"
    "3\n"
    "01:02:03,004 --> 01:02:04,005\n"
    "Late cue\n"
    "\n"
)


@pytest.fixture
def sample_vtt():
    """A VTT document with header, identifier, settings, and multi-line text."""
    return SAMPLE_VTT


@pytest.fixture
def sample_srt():
    """The exact SRT conversion of sample_vtt."""
    return SAMPLE_SRT


@pytest.fixture
def vtt_dir(tmp_path: Path) -> Path:
    """A temp directory holding two .vtt files and one unrelated file."""
    (tmp_path / "episode01.vtt").write_text(SAMPLE_VTT, encoding="utf-8")
    (tmp_path / "Episode02.VTT").write_text(
        "WEBVTT\n\n00:10.000 --> 00:11.000\nSecond file\n", encoding="utf-8"
    )
    (tmp_path / "notes.txt").write_text("not subtitles", encoding="utf-8")
    return tmp_path

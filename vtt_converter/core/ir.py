"""Records passed between the parser, the renderer, and collaborators.

WHY: The parser, the SRT renderer, the archive builder, and the HTTP/CLI
layers all exchange the same two shapes: a single subtitle cue, and a
converted output file. Typed dataclasses make that contract explicit.

HOW: Two frozen dataclasses:
  Cue           — one subtitle entry with source timestamps and text
  ConvertedFile — one finished SRT document with its derived file name

RULES:
- Both records are immutable; they are built once and never revisited
- Cue.start / Cue.end keep the source (VTT) spelling; formatting to SRT
  happens only at render time
- Cue.text keeps internal newlines exactly as they appeared
"""

from __future__ import annotations

from dataclasses import dataclass

SRT_MEDIA_TYPE = "application/x-subrip"


@dataclass(frozen=True)
class Cue:
    """A single subtitle entry parsed from WebVTT.

    Attributes:
        start: Start timestamp as written in the source, e.g. ``"01:02.500"``.
        end: End timestamp as written in the source.
        text: Body lines joined with ``"\\n"``; may be empty.
    """

    start: str
    end: str
    text: str


@dataclass(frozen=True)
class ConvertedFile:
    """One converted SRT document ready to be saved, zipped, or served.

    Attributes:
        name: Output file name, e.g. ``"episode.srt"``.
        content: The SRT text.
        cue_count: Number of cue blocks in ``content``.
        media_type: MIME type used when serving the file.
    """

    name: str
    content: str
    cue_count: int
    media_type: str = SRT_MEDIA_TYPE

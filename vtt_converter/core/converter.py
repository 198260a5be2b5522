"""VTT → SRT conversion and output file naming.

WHY: Every collaborator (CLI, HTTP service, library callers) needs the
same two things from a VTT file: the SRT text and the name to save it
under. Keeping both here means they can never drift apart.

HOW: convert_vtt_to_srt() runs the cue parser and hands the cues to
render_srt(), which writes one block per cue:

    <index>
    <start> --> <end>
    <text>
    <blank line>

srt_filename() swaps a trailing ``.vtt`` for ``.srt``.
convert_document() bundles both into a ConvertedFile.

RULES:
- Sequence numbers are 1..N with no gaps, in cue order
- Every output line ends with ``\\n``; the last block ends with ``\\n\\n``
- Empty input and input without valid cues both yield ``""``
- Pure functions, safe to call concurrently on different inputs
"""

from __future__ import annotations

import re
from typing import Iterable, List

from vtt_converter.core.ir import ConvertedFile, Cue
from vtt_converter.core.parser import parse_cues
from vtt_converter.core.timecode import format_timestamp

_VTT_SUFFIX_RE = re.compile(r"\.vtt$", re.IGNORECASE)


def render_srt(cues: Iterable[Cue]) -> str:
    """Render cues as SRT text, numbering them from 1."""
    lines: List[str] = []
    for index, cue in enumerate(cues, start=1):
        lines.append(str(index))
        lines.append("{} --> {}".format(
            format_timestamp(cue.start), format_timestamp(cue.end),
        ))
        lines.append(cue.text)
        lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def convert_vtt_to_srt(vtt_text: str) -> str:
    """Convert WebVTT text to SRT text.

    Args:
        vtt_text: Raw VTT content. ``None`` or ``""`` are accepted.

    Returns:
        The SRT document, or ``""`` when there is nothing to convert.
    """
    if not vtt_text:
        return ""
    return render_srt(parse_cues(vtt_text))


def srt_filename(name: str) -> str:
    """Derive the output name for a source file.

    ``"Episode.VTT"`` → ``"Episode.srt"``; names without a ``.vtt``
    suffix get ``.srt`` appended.
    """
    if _VTT_SUFFIX_RE.search(name):
        return _VTT_SUFFIX_RE.sub(".srt", name)
    return name + ".srt"


def convert_document(name: str, vtt_text: str) -> ConvertedFile:
    """Convert one source file's content and derive its output name.

    Args:
        name: Source file name (used only to derive the output name).
        vtt_text: The source file's text content.

    Returns:
        A ConvertedFile holding the SRT text, output name, and cue count.
    """
    cues = parse_cues(vtt_text) if vtt_text else []
    return ConvertedFile(
        name=srt_filename(name),
        content=render_srt(cues),
        cue_count=len(cues),
    )

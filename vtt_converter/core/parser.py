"""Line-oriented WebVTT cue parser.

WHY: WebVTT files in the wild are messy: CRLF line endings, BOMs, header
metadata blocks, optional cue identifiers, cue settings after the end
timestamp, and the occasional broken time line. The converter needs an
ordered list of cues out of all of that without ever failing.

HOW: Normalize line endings, skip the ``WEBVTT`` header block, then walk
the lines once with an index:
  identifier? → time line → body lines → blank separators → emit cue
A time line that does not match the timestamp grammar is dropped and the
walk resumes on the following line, so the orphaned body lines fall
through as stray lines until the next time line.

RULES:
- parse_cues() never raises; unusable input yields an empty list
- Cue order follows source order
- Body lines are kept verbatim (no trimming, no tag stripping)
- Only the first timestamp pair on a time line is used; cue settings
  after the end timestamp are ignored
- Dropped blocks are logged at DEBUG level
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from vtt_converter.core.ir import Cue

logger = logging.getLogger(__name__)

ARROW = "-->"
HEADER_MARKER = "WEBVTT"
BOM = "\ufeff"

# [H+:]M{1,2}:SS.mmm on each side of the arrow
_TIMESTAMP = r"(?:\d+:)?\d{1,2}:\d{2}\.\d{3}"
TIME_LINE_RE = re.compile(
    r"(?P<start>{ts})\s*-->\s*(?P<end>{ts})".format(ts=_TIMESTAMP)
)

_NEWLINE_RE = re.compile(r"\r\n?")


def _is_blank(line: str) -> bool:
    return not line.strip()


def split_lines(text: str) -> List[str]:
    """Normalize ``\\r\\n`` and lone ``\\r`` to ``\\n`` and split into lines."""
    return _NEWLINE_RE.sub("\n", text).split("\n")


def parse_time_line(line: str) -> Optional[Tuple[str, str]]:
    """Extract the (start, end) timestamps from a cue time line.

    Returns None when the line holds no valid timestamp pair.
    """
    match = TIME_LINE_RE.search(line)
    if match is None:
        return None
    return match.group("start"), match.group("end")


def _skip_header(lines: List[str]) -> int:
    """Return the index of the first line after the optional WEBVTT header."""
    i = 0
    while i < len(lines) and _is_blank(lines[i]):
        i += 1
    if i < len(lines) and lines[i].strip().startswith(HEADER_MARKER):
        i += 1
        # Header metadata runs until the first blank line
        while i < len(lines) and not _is_blank(lines[i]):
            i += 1
    return i


def parse_cues(text: str) -> List[Cue]:
    """Parse WebVTT text into an ordered list of cues.

    Args:
        text: Raw file content, any newline convention.

    Returns:
        Cues in source order. Empty when no valid cue is found.
    """
    if not text:
        return []

    lines = split_lines(text.lstrip(BOM))
    cues: List[Cue] = []
    i = _skip_header(lines)

    while i < len(lines):
        # Optional cue identifier
        if not _is_blank(lines[i]) and ARROW not in lines[i]:
            i += 1
            if i >= len(lines):
                break

        time_line = lines[i]
        i += 1
        if ARROW not in time_line:
            continue

        times = parse_time_line(time_line)
        if times is None:
            logger.debug("Skipping cue block with malformed time line: %r", time_line)
            continue

        body: List[str] = []
        while i < len(lines) and not _is_blank(lines[i]):
            body.append(lines[i])
            i += 1

        while i < len(lines) and _is_blank(lines[i]):
            i += 1

        cues.append(Cue(start=times[0], end=times[1], text="\n".join(body)))

    return cues

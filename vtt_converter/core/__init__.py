"""Conversion core: data records, VTT parsing, timestamp formatting.

WHY: The core package is the only part of the converter with real
logic. It is kept pure (text in, text out) so the CLI, the HTTP
service, and tests can all drive it without setup.

HOW: ir.py defines the records, parser.py splits VTT text into cues,
timecode.py normalizes timestamps, converter.py renders SRT and derives
output file names.

RULES:
- No I/O, no configuration, no process-wide state
- Functions are total: malformed input yields fewer cues, not errors
"""

from vtt_converter.core.converter import (
    convert_document,
    convert_vtt_to_srt,
    render_srt,
    srt_filename,
)
from vtt_converter.core.ir import ConvertedFile, Cue
from vtt_converter.core.parser import parse_cues, parse_time_line
from vtt_converter.core.timecode import format_timestamp

__all__ = [
    "ConvertedFile",
    "Cue",
    "convert_document",
    "convert_vtt_to_srt",
    "format_timestamp",
    "parse_cues",
    "parse_time_line",
    "render_srt",
    "srt_filename",
]

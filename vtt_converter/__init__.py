"""VTT to SRT Converter — batch WebVTT → SubRip subtitle conversion.

WHY: Browsers, streaming platforms and YouTube downloads hand out WebVTT
captions, while most editing and playback tools still expect SubRip (SRT).
This package converts one or many VTT files into SRT, from the command
line, over HTTP, or as a library call.

HOW: Three layers, each independently testable:
  core     — pure parse (VTT → Cue list) and render (Cue list → SRT text)
  archive  — bundles converted files into a single ZIP download
  cli / server — thin collaborators that read files and deliver results

RULES:
- The core performs no I/O and reads no configuration
- Malformed input degrades to fewer cues, never to an exception
- Every collaborator goes through core.converter.convert_document()
"""

__version__ = "0.1.0"

"""Configuration constants and .env loading.

WHY: Centralizes the configurable values of the CLI and HTTP service so
they are easy to find, update, and override. File suffixes, archive
naming, and server limits are plain data, not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values with environment-variable overrides.

RULES:
- The conversion core never imports this module
- All defaults can be overridden via VTT_* environment variables
- Suffixes are lowercase and include the leading dot
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from vtt_converter.core.ir import SRT_MEDIA_TYPE  # re-exported for the server

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------

SUPPORTED_INPUT_SUFFIXES: set[str] = {".vtt"}
"""Input file suffixes accepted by the CLI and the HTTP service."""

ZIP_MEDIA_TYPE = "application/zip"

ARCHIVE_NAME = os.getenv("VTT_ARCHIVE_NAME", "converted-srt-files.zip")

# ---------------------------------------------------------------------------
# HTTP service
# ---------------------------------------------------------------------------

SERVER_HOST = os.getenv("VTT_SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("VTT_SERVER_PORT", "8000"))
MAX_UPLOAD_FILES = int(os.getenv("VTT_MAX_UPLOAD_FILES", "50"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("VTT_LOG_LEVEL", "INFO").upper()


def is_supported_input(filename: str) -> bool:
    """True if ``filename`` ends with a supported input suffix (any case)."""
    lowered = filename.lower()
    return any(lowered.endswith(suffix) for suffix in SUPPORTED_INPUT_SUFFIXES)

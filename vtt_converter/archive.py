"""ZIP bundling of converted SRT files.

WHY: Converting a season of episodes produces dozens of SRT files.
Users want them as one download (HTTP service) or one file on disk
(CLI ``--zip``) rather than a pile of separate files.

HOW: Writes each ConvertedFile into an in-memory ZIP archive with
zipfile + io.BytesIO and returns the archive bytes. Entry names that
collide get a numeric suffix before the extension.

RULES:
- Entries appear in the order the files were given
- Content is stored UTF-8 encoded, DEFLATE compressed
- Duplicate names: "a.srt", "a-2.srt", "a-3.srt", ...
- An empty file list is a caller error (ValueError)
"""

from __future__ import annotations

import io
import logging
import zipfile
from typing import List, Sequence, Set

from vtt_converter.config import ARCHIVE_NAME
from vtt_converter.core.ir import ConvertedFile

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_NAME = ARCHIVE_NAME


def unique_names(names: Sequence[str]) -> List[str]:
    """Return ``names`` with duplicates renamed ``stem-N.ext`` (N from 2)."""
    taken: Set[str] = set()
    result: List[str] = []
    for name in names:
        candidate = name
        if candidate in taken:
            dot_idx = name.rfind(".")
            if dot_idx > 0:
                stem, ext = name[:dot_idx], name[dot_idx:]
            else:
                stem, ext = name, ""
            counter = 2
            while "{}-{}{}".format(stem, counter, ext) in taken:
                counter += 1
            candidate = "{}-{}{}".format(stem, counter, ext)
        taken.add(candidate)
        result.append(candidate)
    return result


def build_archive(files: Sequence[ConvertedFile]) -> bytes:
    """Bundle converted files into a ZIP archive.

    Args:
        files: Converted files, in the order they should appear.

    Returns:
        The ZIP archive as bytes.

    Raises:
        ValueError: If ``files`` is empty.
    """
    if not files:
        raise ValueError("No converted files to archive")

    buffer = io.BytesIO()
    entry_names = unique_names([f.name for f in files])
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for entry_name, converted in zip(entry_names, files):
            archive.writestr(entry_name, converted.content.encode("utf-8"))

    logger.info("Built archive with %d file(s)", len(files))
    return buffer.getvalue()

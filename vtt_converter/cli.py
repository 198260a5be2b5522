"""Command-line interface for the VTT to SRT converter.

WHY: Users need a simple way to convert a folder of WebVTT captions from
the terminal. The CLI wires together file selection, the conversion core,
and saving (individual .srt files or one ZIP archive) behind a single
command.

HOW: Uses argparse to accept input files and output options. Each input
is read as UTF-8 text, converted with convert_document(), and saved next
to the source (or to --output-dir). Status messages go to stderr so
``--stdout`` output can be piped.

RULES:
- Positional arguments: one or more input file paths
- Inputs without a .vtt suffix are ignored with a warning
- Missing or unreadable inputs are reported and skipped
- Output naming: {stem}.srt, numeric suffix on conflict ({stem}-2.srt)
  unless --overwrite is given
- --zip writes a single archive instead of individual files; an existing
  archive gets the same numeric-suffix treatment
- --stdout prints the SRT of exactly one input
- Exit code 1 when no input could be converted or options are invalid
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from vtt_converter.archive import DEFAULT_ARCHIVE_NAME, build_archive
from vtt_converter.config import LOG_LEVEL, is_supported_input
from vtt_converter.core.converter import convert_document
from vtt_converter.core.ir import ConvertedFile

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_output_path(name: str, output_dir: Path, overwrite: bool) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    WHY: Users may run the converter several times on the same folder.
    Silently replacing an earlier result (possibly hand-edited) would
    lose work, so conflicts get -2, -3, ... unless --overwrite is set.

    RULES:
    - First attempt: {name} (e.g. episode.srt)
    - Conflict: counter inserted before the extension (episode-2.srt)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / name
    if overwrite or not base_path.exists():
        return base_path

    stem = base_path.stem
    ext = base_path.suffix
    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _select_inputs(paths: List[str]) -> List[Path]:
    """Filter the positional arguments down to existing .vtt files."""
    selected: List[Path] = []
    ignored = 0
    for raw in paths:
        path = Path(raw)
        if not is_supported_input(path.name):
            ignored += 1
            continue
        if not path.is_file():
            _status("Warning: File not found: {}".format(path))
            continue
        selected.append(path)

    if ignored:
        _status("Warning: {} file(s) ignored because they are not .vtt files.".format(ignored))
    return selected


def _convert_inputs(inputs: List[Path]) -> List[Tuple[Path, ConvertedFile]]:
    """Read and convert each input. Returns (source path, ConvertedFile) pairs."""
    results: List[Tuple[Path, ConvertedFile]] = []
    for path in inputs:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _status("Warning: Could not read {}: {}".format(path, exc))
            continue
        converted = convert_document(path.name, text)
        logger.debug("Converted %s (%d cues)", path, converted.cue_count)
        if converted.cue_count == 0:
            _status("Warning: No cues found in {}".format(path.name))
        results.append((path, converted))
    return results


def _write_files(
    results: List[Tuple[Path, ConvertedFile]],
    output_dir: Optional[Path],
    overwrite: bool,
) -> List[Path]:
    saved: List[Path] = []
    for source, converted in results:
        target_dir = output_dir if output_dir is not None else source.parent
        path = _resolve_output_path(converted.name, target_dir, overwrite)
        path.write_text(converted.content, encoding="utf-8")
        saved.append(path)
        _status("  Saved: {}".format(path))
    return saved


def _write_archive(
    files: List[ConvertedFile],
    zip_path: Path,
    overwrite: bool,
) -> Path:
    zip_path = _resolve_output_path(zip_path.name, zip_path.parent, overwrite)
    zip_path.write_bytes(build_archive(files))
    _status("  Saved archive: {} ({} file(s))".format(zip_path, len(files)))
    return zip_path


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without converting anything.
    """
    parser = argparse.ArgumentParser(
        prog="vtt_converter",
        description="Convert WebVTT (.vtt) subtitle files to SubRip (.srt).",
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="One or more .vtt files to convert.",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save .srt files (default: next to each input).",
    )

    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite existing .srt or .zip files instead of adding a numeric suffix.",
    )

    output_mode = parser.add_mutually_exclusive_group()
    output_mode.add_argument(
        "--zip",
        nargs="?",
        const=DEFAULT_ARCHIVE_NAME,
        default=None,
        metavar="PATH",
        help="Bundle all results into one ZIP archive "
             "(default name: {}).".format(DEFAULT_ARCHIVE_NAME),
    )
    output_mode.add_argument(
        "--stdout",
        action="store_true",
        help="Print the converted SRT to stdout (single input only).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging, including skipped malformed cue blocks.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    inputs = _select_inputs(args.inputs)
    if not inputs:
        _fail("No .vtt files to convert.")

    if args.stdout and len(inputs) != 1:
        _fail("--stdout accepts exactly one input file ({} given).".format(len(inputs)))

    results = _convert_inputs(inputs)
    if not results:
        _fail("None of the input files could be read.")

    if args.stdout:
        sys.stdout.write(results[0][1].content)
        return

    _status("Converted {} file(s)".format(len(results)))
    if args.zip:
        zip_path = Path(args.zip)
        if output_dir is not None and not zip_path.is_absolute():
            zip_path = output_dir / zip_path
        _write_archive([converted for _, converted in results], zip_path, args.overwrite)
    else:
        _write_files(results, output_dir, args.overwrite)


if __name__ == "__main__":
    main()

"""FastAPI application: upload page and conversion API.

WHY: Many users never open a terminal. The service offers the familiar
browser workflow (select several .vtt files, convert, download each
result or a single ZIP) and the same operations as a JSON API for
scripts and automations.

HOW: A single FastAPI app exposes five endpoints grouped by tags.
Uploaded files are read fully, decoded as UTF-8, and converted
synchronously with convert_document(). Conversion is fast and pure,
so there is no job store or background task.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- Error responses use a consistent ErrorResponse schema
- Only .vtt uploads are accepted (400); at most MAX_UPLOAD_FILES per
  request (413); content must be UTF-8 (422)
- Download filenames come from srt_filename() / ARCHIVE_NAME
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Annotated, List
from urllib.parse import quote

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response

from vtt_converter import __version__
from vtt_converter.archive import build_archive
from vtt_converter.config import (
    ARCHIVE_NAME,
    LOG_LEVEL,
    MAX_UPLOAD_FILES,
    SERVER_HOST,
    SERVER_PORT,
    SRT_MEDIA_TYPE,
    ZIP_MEDIA_TYPE,
    is_supported_input,
)
from vtt_converter.core.converter import convert_document
from vtt_converter.core.ir import ConvertedFile
from vtt_converter.server.models import (
    ConversionResponse,
    ConvertedFileResponse,
    ErrorResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

_NON_ASCII_RE = re.compile(r"[^\x20-\x7e]")

app = FastAPI(
    title="VTT to SRT Converter API",
    description=(
        "Convert WebVTT subtitle files to SubRip (SRT). Upload one or more "
        ".vtt files and receive the converted text as JSON, a single .srt "
        "download, or a ZIP archive."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>VTT to SRT Converter</title>
</head>
<body>
  <h1>VTT to SRT Converter</h1>
  <form id="uploadForm" method="post" enctype="multipart/form-data" action="/conversions/archive">
    <p><input id="vttInput" type="file" name="files" accept=".vtt" multiple required></p>
    <p>
      <button id="convertBtn" type="button">Convert</button>
      <button type="submit">Download all as ZIP</button>
    </p>
  </form>
  <p id="statusNote">Only .vtt files are converted.</p>
  <ul id="resultList"></ul>
  <script>
    const form = document.getElementById("uploadForm");
    const resultList = document.getElementById("resultList");
    const statusNote = document.getElementById("statusNote");

    document.getElementById("convertBtn").addEventListener("click", async () => {
      resultList.innerHTML = "";
      const response = await fetch("/conversions", { method: "POST", body: new FormData(form) });
      const data = await response.json();
      if (!response.ok) {
        statusNote.textContent = "Error: " + data.detail;
        return;
      }
      for (const file of data.files) {
        const blob = new Blob([file.content], { type: "application/x-subrip;charset=utf-8" });
        const link = document.createElement("a");
        link.href = URL.createObjectURL(blob);
        link.download = file.name;
        link.textContent = "Download " + file.name + " (" + file.cue_count + " cues)";
        const item = document.createElement("li");
        item.appendChild(link);
        resultList.appendChild(item);
      }
      statusNote.textContent = "Converted " + data.files.length + " file(s).";
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sanitize_filename(raw: str) -> str:
    """Strip any client-supplied directory components."""
    return Path(raw.replace("\\", "/")).name


def _validate_batch(files: List[UploadFile]) -> None:
    """Raise HTTPException if the upload batch is empty, too large, or not .vtt."""
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded.")
    if len(files) > MAX_UPLOAD_FILES:
        raise HTTPException(
            status_code=413,
            detail="Too many files ({}). Maximum per request: {}.".format(
                len(files), MAX_UPLOAD_FILES
            ),
        )
    for upload in files:
        filename = _sanitize_filename(upload.filename or "")
        if not is_supported_input(filename):
            raise HTTPException(
                status_code=400,
                detail="Unsupported file '{}'. Only .vtt files can be converted.".format(
                    filename
                ),
            )


async def _convert_upload(upload: UploadFile) -> ConvertedFile:
    """Read one uploaded file and convert it."""
    filename = _sanitize_filename(upload.filename or "")
    raw = await upload.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=422,
            detail="File '{}' is not valid UTF-8 text.".format(filename),
        )
    converted = convert_document(filename, text)
    logger.info("Converted %s -> %s (%d cues)", filename, converted.name, converted.cue_count)
    return converted


def _content_disposition(filename: str) -> str:
    """Build an attachment header value that survives non-ASCII names.

    RULES:
    - Plain ``filename="..."`` when the name needs no quoting
    - Otherwise an ASCII fallback plus the RFC 5987 ``filename*`` form,
      as Starlette's FileResponse does
    """
    quoted = quote(filename)
    if quoted == filename:
        return 'attachment; filename="{}"'.format(filename)
    fallback = _NON_ASCII_RE.sub("_", filename).replace('"', "_")
    return "attachment; filename=\"{}\"; filename*=UTF-8''{}".format(fallback, quoted)


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Page
# ---------------------------------------------------------------------------


@app.get(
    "/",
    response_class=HTMLResponse,
    tags=["page"],
    summary="Upload page",
    description="Minimal HTML page for selecting .vtt files and downloading the results.",
)
async def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)


# ---------------------------------------------------------------------------
# Endpoints: Conversions
# ---------------------------------------------------------------------------


@app.post(
    "/conversions",
    response_model=ConversionResponse,
    tags=["conversions"],
    summary="Convert files and return the results as JSON",
    description=(
        "Upload one or more .vtt files. Each file is converted to SRT and "
        "returned with its derived .srt filename and cue count."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "No files, or a non-.vtt file"},
        413: {"model": ErrorResponse, "description": "Too many files in one request"},
        422: {"model": ErrorResponse, "description": "File is not UTF-8 text"},
    },
)
async def create_conversions(
    files: Annotated[
        List[UploadFile],
        File(description="One or more .vtt files to convert."),
    ],
) -> ConversionResponse:
    _validate_batch(files)

    results = []
    for upload in files:
        converted = await _convert_upload(upload)
        results.append(ConvertedFileResponse(
            source_name=_sanitize_filename(upload.filename or ""),
            name=converted.name,
            cue_count=converted.cue_count,
            content=converted.content,
        ))
    return ConversionResponse(files=results)


@app.post(
    "/conversions/srt",
    tags=["conversions"],
    summary="Convert the first file and download it as .srt",
    description=(
        "Upload .vtt files and download the first one converted to SRT. "
        "The download name replaces the .vtt suffix with .srt."
    ),
    responses={
        200: {"content": {SRT_MEDIA_TYPE: {}}, "description": "The converted SRT file"},
        400: {"model": ErrorResponse, "description": "No files, or a non-.vtt file"},
        413: {"model": ErrorResponse, "description": "Too many files in one request"},
        422: {"model": ErrorResponse, "description": "File is not UTF-8 text"},
    },
)
async def download_srt(
    files: Annotated[
        List[UploadFile],
        File(description=".vtt file to convert (only the first is used)."),
    ],
) -> Response:
    _validate_batch(files)
    converted = await _convert_upload(files[0])
    return _attachment(converted.content.encode("utf-8"), converted.media_type, converted.name)


@app.post(
    "/conversions/archive",
    tags=["conversions"],
    summary="Convert files and download them as a ZIP archive",
    description=(
        "Upload one or more .vtt files and download a ZIP archive holding "
        "one .srt per upload. Duplicate names get a numeric suffix."
    ),
    responses={
        200: {"content": {ZIP_MEDIA_TYPE: {}}, "description": "ZIP archive of SRT files"},
        400: {"model": ErrorResponse, "description": "No files, or a non-.vtt file"},
        413: {"model": ErrorResponse, "description": "Too many files in one request"},
        422: {"model": ErrorResponse, "description": "File is not UTF-8 text"},
    },
)
async def download_archive(
    files: Annotated[
        List[UploadFile],
        File(description="One or more .vtt files to convert."),
    ],
) -> Response:
    _validate_batch(files)
    converted = [await _convert_upload(upload) for upload in files]
    return _attachment(build_archive(converted), ZIP_MEDIA_TYPE, ARCHIVE_NAME)


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the vtt-converter-api console script."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)

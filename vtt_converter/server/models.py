"""Pydantic response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for response serialization
and automatic OpenAPI documentation.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Response models never expose internal implementation details
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ConvertedFileResponse(BaseModel):
    """One converted file returned by POST /conversions."""

    source_name: str = Field(description="Uploaded .vtt filename.")
    name: str = Field(description="Derived .srt filename.")
    cue_count: int = Field(description="Number of cues in the converted file.")
    content: str = Field(description="SRT file content.")


class ConversionResponse(BaseModel):
    """Result of converting a batch of uploaded files.

    RULES:
    - files are in upload order
    - a file with no valid cues is still listed (cue_count 0, empty content)
    """

    files: List[ConvertedFileResponse] = Field(description="Converted files, in upload order.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "files": [
                    {
                        "source_name": "episode01.vtt",
                        "name": "episode01.srt",
                        "cue_count": 1,
                        "content": "1\n00:00:01,000 --> 00:00:02,500\nHello\n\n",
                    }
                ]
            }
        ]
    }}


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})

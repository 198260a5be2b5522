"""Tests for the FastAPI conversion service.

WHY: Validates that every endpoint behaves correctly: happy paths,
validation errors, download headers, and the OpenAPI schema. Uses
FastAPI TestClient for synchronous in-process testing.

RULES:
- All tests use the FastAPI TestClient (synchronous)
- Uploads are built in memory; nothing touches the filesystem
"""

from __future__ import annotations

import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from vtt_converter.server import app as app_module
from vtt_converter.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


def _upload(name, text):
    return ("files", (name, text.encode("utf-8"), "text/vtt"))


class TestIndexPage:

    def test_serves_upload_form(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'type="file"' in response.text
        assert "/conversions/archive" in response.text

    def test_page_lists_a_download_per_file(self, client):
        page = client.get("/").text
        assert 'fetch("/conversions"' in page
        assert 'id="resultList"' in page
        assert "URL.createObjectURL" in page
        assert "link.download = file.name" in page


class TestConversions:

    def test_single_file(self, client, sample_vtt, sample_srt):
        response = client.post("/conversions", files=[_upload("pilot.vtt", sample_vtt)])
        assert response.status_code == 200
        assert response.json() == {
            "files": [
                {
                    "source_name": "pilot.vtt",
                    "name": "pilot.srt",
                    "cue_count": 3,
                    "content": sample_srt,
                }
            ]
        }

    def test_multiple_files_keep_order(self, client, sample_vtt):
        response = client.post("/conversions", files=[
            _upload("b.vtt", sample_vtt),
            _upload("A.VTT", "WEBVTT\n\n00:01.000 --> 00:02.000\nHi\n"),
        ])
        names = [f["name"] for f in response.json()["files"]]
        assert names == ["b.srt", "A.srt"]

    def test_file_without_cues(self, client):
        response = client.post("/conversions", files=[_upload("empty.vtt", "WEBVTT\n")])
        assert response.status_code == 200
        assert response.json()["files"][0]["cue_count"] == 0
        assert response.json()["files"][0]["content"] == ""

    def test_path_components_stripped(self, client, sample_vtt):
        response = client.post("/conversions", files=[_upload("../../etc/pilot.vtt", sample_vtt)])
        assert response.json()["files"][0]["source_name"] == "pilot.vtt"

    def test_reject_non_vtt(self, client):
        response = client.post("/conversions", files=[_upload("notes.txt", "hello")])
        assert response.status_code == 400
        assert "notes.txt" in response.json()["detail"]

    def test_reject_missing_files(self, client):
        response = client.post("/conversions")
        assert response.status_code == 422

    def test_reject_non_utf8(self, client):
        files = [("files", ("latin.vtt", "WEBVTT\n\nÅ".encode("latin-1"), "text/vtt"))]
        response = client.post("/conversions", files=files)
        assert response.status_code == 422
        assert "UTF-8" in response.json()["detail"]

    def test_reject_too_many_files(self, client, monkeypatch):
        monkeypatch.setattr(app_module, "MAX_UPLOAD_FILES", 2)
        files = [_upload("{}.vtt".format(n), "WEBVTT\n") for n in range(3)]
        response = client.post("/conversions", files=files)
        assert response.status_code == 413


class TestDownloads:

    def test_download_srt(self, client, sample_vtt, sample_srt):
        response = client.post("/conversions/srt", files=[_upload("Pilot.VTT", sample_vtt)])
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-subrip")
        assert response.headers["content-disposition"] == 'attachment; filename="Pilot.srt"'
        assert response.content.decode("utf-8") == sample_srt

    def test_download_srt_non_ascii_name(self, client, sample_vtt, sample_srt):
        response = client.post("/conversions/srt", files=[_upload("字幕.vtt", sample_vtt)])
        assert response.status_code == 200
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="__.srt"')
        assert "filename*=UTF-8''%E5%AD%97%E5%B9%95.srt" in disposition
        assert response.content.decode("utf-8") == sample_srt

    def test_download_srt_uses_first_file(self, client, sample_vtt):
        response = client.post("/conversions/srt", files=[
            _upload("first.vtt", sample_vtt),
            _upload("second.vtt", sample_vtt),
        ])
        assert 'filename="first.srt"' in response.headers["content-disposition"]

    def test_download_archive(self, client, sample_vtt, sample_srt):
        response = client.post("/conversions/archive", files=[
            _upload("one.vtt", sample_vtt),
            _upload("two.vtt", sample_vtt),
        ])
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/zip"
        assert 'filename="converted-srt-files.zip"' in response.headers["content-disposition"]

        with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
            assert archive.namelist() == ["one.srt", "two.srt"]
            assert archive.read("two.srt").decode("utf-8") == sample_srt

    def test_archive_rejects_non_vtt(self, client, sample_vtt):
        response = client.post("/conversions/archive", files=[
            _upload("one.vtt", sample_vtt),
            _upload("two.srt", "already srt"),
        ])
        assert response.status_code == 400


class TestHealthAndSchema:

    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}

    def test_openapi_schema_generates(self, client):
        response = client.get("/openapi.json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        for path in ("/", "/conversions", "/conversions/srt", "/conversions/archive", "/health"):
            assert path in paths

    def test_endpoints_have_descriptions(self, client):
        schema = client.get("/openapi.json").json()
        for path, methods in schema["paths"].items():
            for method, operation in methods.items():
                assert operation.get("description"), "{} {} lacks a description".format(
                    method.upper(), path
                )


class TestContentDisposition:

    def test_plain_ascii_name(self):
        assert app_module._content_disposition("Pilot.srt") == 'attachment; filename="Pilot.srt"'

    def test_quote_and_space_in_name(self):
        value = app_module._content_disposition('say "hi".srt')
        assert value == "attachment; filename=\"say _hi_.srt\"; filename*=UTF-8''say%20%22hi%22.srt"

    def test_header_is_latin1_encodable(self):
        value = app_module._content_disposition("Субтитры.srt")
        value.encode("latin-1")
        assert "filename*=UTF-8''" in value

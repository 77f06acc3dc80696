"""Tests for formpost.client module."""

import pytest

from formpost.builder import RequestBuilder
from formpost.client import Uploader


class TestUploaderInit:
    """Tests for Uploader initialization."""

    def test_default_init(self):
        """Test default attributes."""
        uploader = Uploader("https://example.com/upload")
        assert uploader.server_url == "https://example.com/upload"
        assert uploader.token is None
        assert uploader.timeout == 10.0
        assert isinstance(uploader.builder, RequestBuilder)

    def test_invalid_url_rejected(self):
        """Test a non-http server URL is rejected up front."""
        with pytest.raises(ValueError):
            Uploader("ftp://example.com/upload")


class TestUploaderPrepare:
    """Tests for Uploader.prepare."""

    def test_prepare_uses_settings(self, upload_file):
        """Test token and timeout flow into the prepared request."""
        uploader = Uploader("https://example.com/upload", token="secret", timeout=4.0)
        req = uploader.prepare(upload_file, {"name": "Pau"}, "file")

        assert req.url == "https://example.com/upload"
        assert req.method == "POST"
        assert req.timeout == 4.0
        assert req.header_map["authorization"] == "Token secret"
        assert req.content_type.startswith("multipart/form-data; boundary=Boundary-")
        assert b'filename="pau.png"' in req.body

    def test_prepare_uses_builder(self, upload_file, fixed_boundary):
        """Test the injected builder encodes the body."""
        uploader = Uploader(
            "http://example.com/upload",
            builder=RequestBuilder(boundary_factory=fixed_boundary),
        )
        req = uploader.prepare(upload_file, {"name": "Pau"}, "file", headers={"X-Trace": "abc"})

        assert req.boundary == "B1"
        assert req.body.startswith(b'--B1\r\nContent-Disposition: form-data; name="name"\r\n')
        assert req.body.endswith(b"\r\n--B1--")
        assert req.header_map["x-trace"] == "abc"
        assert "authorization" not in req.header_map

    def test_unreadable_file_still_prepared(self, tmp_path, fixed_boundary):
        """Test the lenient policy yields an empty attachment."""
        uploader = Uploader(
            "http://example.com/upload",
            builder=RequestBuilder(boundary_factory=fixed_boundary),
        )
        req = uploader.prepare(tmp_path / "missing.pdf", {}, "file")
        assert req.body.endswith(b"Content-Type: application/pdf\r\n\r\n\r\n--B1--")

    def test_each_prepare_gets_new_boundary(self, upload_file):
        """Test two prepared requests never share a boundary."""
        uploader = Uploader("https://example.com/upload")
        first = uploader.prepare(upload_file, {}, "file")
        second = uploader.prepare(upload_file, {}, "file")
        assert first.boundary != second.boundary

"""
Assemble multipart upload bodies from a file on disk and a set of form fields.

The builder owns the boundary, the MIME lookup and the file read; the byte
layout itself lives in `formpost.multipart`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from formpost import mime
from formpost.errors import FileReadError
from formpost.headers import order_headers
from formpost.multipart import FileAttachment, content_type_for, encode, make_boundary
from formpost.models import PreparedRequest
from formpost.utils import parse_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def read_all(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file, raising FileReadError when it is missing or unreadable."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileReadError(f"Could not read {os.fspath(path)!r}: {exc}") from exc


class RequestBuilder:
    """
    Build the body and Content-Type of a single-file multipart upload.

    Args:
        read_file: Callable returning the file's bytes; raises
            FileReadError or OSError on failure
        logger: Logger used to report read failures (default: module logger)
        boundary_factory: Callable producing a fresh boundary per build
        lenient_read: Send an empty attachment instead of raising when the
            file cannot be read (default: True)
        default_mime_type: Content-Type used when the extension is unknown
            (default: "", i.e. an empty Content-Type part header)
    """

    def __init__(
        self,
        read_file: Callable[[str], bytes] = read_all,
        logger: logging.Logger = logger,
        boundary_factory: Callable[[], str] = make_boundary,
        lenient_read: bool = True,
        default_mime_type: str = "",
    ) -> None:
        self.read_file = read_file
        self.logger = logger
        self.boundary_factory = boundary_factory
        self.lenient_read = lenient_read
        self.default_mime_type = default_mime_type

    def build(
        self,
        target_url: str,
        file_path: str | os.PathLike[str],
        form_fields: Mapping[str, str],
        file_field_key: str,
    ) -> tuple[bytes, str]:
        """
        Encode `form_fields` and the file at `file_path` for upload to `target_url`.

        Returns:
            (body, content_type) where content_type is the full
            ``multipart/form-data; boundary=...`` header value
        """
        body, boundary = self._encode(target_url, file_path, form_fields, file_field_key)
        return body, content_type_for(boundary)

    def prepare(
        self,
        target_url: str,
        file_path: str | os.PathLike[str],
        form_fields: Mapping[str, str],
        file_field_key: str,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> PreparedRequest:
        """Build the body and wrap it in a POST request with upload headers."""
        body, boundary = self._encode(target_url, file_path, form_fields, file_field_key)
        upload_headers = [
            ("Content-Type", content_type_for(boundary)),
            ("Content-Length", str(len(body))),
        ]
        if token is not None:
            upload_headers.insert(0, ("Authorization", f"Token {token}"))
        # Caller headers cannot override the multipart Content-Type or length.
        request_headers = order_headers(headers.items() if headers else (), upload_headers)
        logger.debug("Prepared upload of %s to %s (%d bytes)", file_path, target_url, len(body))
        return PreparedRequest(
            url=target_url,
            headers=request_headers,
            body=body,
            boundary=boundary,
            timeout=timeout,
        )

    def _encode(
        self,
        target_url: str,
        file_path: str | os.PathLike[str],
        form_fields: Mapping[str, str],
        file_field_key: str,
    ) -> tuple[bytes, str]:
        parse_url(target_url)
        path = os.fspath(file_path)
        file_name = os.path.basename(path)
        attachment = FileAttachment(
            field_name=file_field_key,
            file_name=file_name,
            mime_type=mime.resolve(file_name) or self.default_mime_type,
            content=self._read(path),
        )
        boundary = self.boundary_factory()
        return encode(boundary, form_fields, attachment), boundary

    def _read(self, path: str) -> bytes:
        try:
            return self.read_file(path)
        except (FileReadError, OSError) as exc:
            if not self.lenient_read:
                if isinstance(exc, FileReadError):
                    raise
                raise FileReadError(f"Could not read {path!r}: {exc}") from exc
            self.logger.error(
                "Could not get the data - %s", exc, extra={"path": path}
            )
            return b""

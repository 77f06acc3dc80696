from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Mapping
from typing import NamedTuple

BOUNDARY_PREFIX = "Boundary-"


class FileAttachment(NamedTuple):
    field_name: str
    file_name: str
    mime_type: str
    content: bytes


def make_boundary(token_factory: Callable[[], object] = uuid.uuid4) -> str:
    """Return a fresh boundary token such as ``Boundary-3A42CBDB-01A2-...``."""
    return f"{BOUNDARY_PREFIX}{str(token_factory()).upper()}"


def content_type_for(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def _boundary_line(boundary: str) -> bytes:
    return f"--{boundary}\r\n".encode()


def _encode_field(name: str, value: str) -> bytes:
    return (
        f'Content-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n'.encode()
    )


def _encode_file(attachment: FileAttachment) -> bytes:
    # Part headers are inserted verbatim, quotes and line breaks included.
    headers = (
        f'Content-Disposition: form-data; name="{attachment.field_name}"; '
        f'filename="{attachment.file_name}"\r\n'
        f"Content-Type: {attachment.mime_type}\r\n\r\n"
    ).encode()
    return headers + attachment.content + b"\r\n"


def encode_parts(
    boundary: str,
    fields: Mapping[str, str],
    attachments: Iterable[FileAttachment],
) -> bytes:
    """
    Encode form fields followed by any number of file attachments.

    Fields are written in the mapping's iteration order, attachments in
    sequence order, and the body ends with ``--<boundary>--`` without a
    trailing CRLF.
    """
    body_chunks: list[bytes] = []
    for name, value in fields.items():
        body_chunks.append(_boundary_line(boundary))
        body_chunks.append(_encode_field(name, value))
    for attachment in attachments:
        body_chunks.append(_boundary_line(boundary))
        body_chunks.append(_encode_file(attachment))
    body_chunks.append(f"--{boundary}--".encode())
    return b"".join(body_chunks)


def encode(
    boundary: str,
    fields: Mapping[str, str],
    attachment: FileAttachment,
) -> bytes:
    """Build a multipart/form-data body holding `fields` and one file."""
    return encode_parts(boundary, fields, (attachment,))

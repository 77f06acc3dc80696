"""
Extension based MIME type lookup for upload attachments.

Only the file name is inspected, never the content.
"""

from __future__ import annotations

from typing import Final

MIME_TYPES: Final[dict[str, str]] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "pdf": "application/pdf",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "odt": "application/vnd.oasis.opendocument.text",
    "rtf": "application/rtf",
}


def get_file_extension(file_name: str) -> str:
    """Return the text after the last dot, or an empty string if there is none."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1]


def resolve(file_name: str) -> str:
    """
    Resolve the MIME type of `file_name` from its extension.

    Unknown or missing extensions resolve to an empty string; picking a
    fallback such as application/octet-stream is left to the caller.
    """
    return MIME_TYPES.get(get_file_extension(file_name).lower(), "")

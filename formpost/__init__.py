from formpost.builder import RequestBuilder, read_all
from formpost.client import Uploader
from formpost.errors import FormpostError, FileReadError
from formpost.mime import resolve as resolve_mime_type
from formpost.models import PreparedRequest
from formpost.multipart import (
    FileAttachment,
    content_type_for,
    encode,
    encode_parts,
    make_boundary,
)

__all__ = [
    "RequestBuilder",
    "read_all",
    "Uploader",
    "FormpostError",
    "FileReadError",
    "resolve_mime_type",
    "PreparedRequest",
    "FileAttachment",
    "content_type_for",
    "encode",
    "encode_parts",
    "make_boundary",
]

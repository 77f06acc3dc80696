from __future__ import annotations

import os
from collections.abc import Mapping

from formpost.builder import DEFAULT_TIMEOUT, RequestBuilder
from formpost.models import PreparedRequest
from formpost.utils import parse_url


class Uploader:
    """
    Prepare single-file multipart uploads for a fixed server URL.

    The returned PreparedRequest carries everything an HTTP client needs to
    issue the POST: URL, method, ordered headers, body and timeout.

    Args:
        server_url: Endpoint receiving the multipart POST
        token: Credential sent as ``Authorization: Token <token>``; omitted when None
        timeout: Request timeout in seconds handed to the HTTP client
        builder: RequestBuilder used to encode bodies (default: lenient builder)
    """

    def __init__(
        self,
        server_url: str,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        builder: RequestBuilder | None = None,
    ) -> None:
        parse_url(server_url)
        self.server_url = server_url
        self.token = token
        self.timeout = timeout
        self.builder = builder or RequestBuilder()

    def prepare(
        self,
        file_path: str | os.PathLike[str],
        form_fields: Mapping[str, str],
        file_key: str,
        headers: Mapping[str, str] | None = None,
    ) -> PreparedRequest:
        return self.builder.prepare(
            self.server_url,
            file_path,
            form_fields,
            file_key,
            token=self.token,
            timeout=self.timeout,
            headers=headers,
        )
